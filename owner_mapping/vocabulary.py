"""Static word tables used by the owner classifier and the person name parser.

The tables are frozen and grouped into a ``Vocabulary`` so a county can pass
its own variant (``DEFAULT_VOCABULARY.extend(company_keywords=[...])``)
without touching the parsing code.
"""

from dataclasses import dataclass, replace
from typing import FrozenSet, Iterable, Tuple

# Company detection keywords, matched as whole words (case-insensitive)
COMPANY_KEYWORDS = frozenset([
    'INC', 'LLC', 'L.L.C', 'LTD', 'CO', 'CORP', 'CORPORATION', 'COMPANY',
    'LP', 'LLP', 'PLC', 'PC', 'P.C', 'PLLC', 'P.A', 'N.A', 'NA',
    'FOUNDATION', 'ALLIANCE', 'ASSOCIATION', 'ASSOCIATES', 'GROUP',
    'TRUST', 'TR', 'FUND', 'PARTNERS', 'PARTNERSHIP', 'HOLDINGS', 'HOLDING',
    'PROPERTIES', 'PROPERTY', 'REALTY', 'INVESTMENTS', 'INVESTMENT',
    'ENTERPRISES', 'ENTERPRISE', 'MANAGEMENT', 'MGMT', 'DEVELOPMENT',
    'DEVELOPMENTS', 'BUILDERS', 'CONSTRUCTION', 'CONTRACTORS',
    'SOLUTIONS', 'SERVICES', 'BANK', 'SAVINGS', 'MORTGAGE',
    'MINISTRIES', 'CHURCH', 'SCHOOL', 'DISTRICT',
    'DEPT', 'DEP', 'DEPARTMENT', 'GOV', 'GOVERNMENT', 'COUNTY', 'CITY',
    'STATE', 'FEDERAL', 'DIVISION', 'AUTHORITY', 'COMMISSION', 'BOARD',
    'AGENCY', 'HOA',
])

# Words that still mark an organization when a segment fails the person gate
ESTATE_KEYWORDS = frozenset(['TRUST', 'REVOCABLE', 'ESTATE'])

# Canonical honorific spellings; matched case-insensitively with or without the period
PREFIXES = (
    'Mr.', 'Mrs.', 'Ms.', 'Miss', 'Mx.', 'Dr.', 'Prof.', 'Rev.', 'Fr.', 'Br.',
    'Capt.', 'Col.', 'Maj.', 'Lt.', 'Sgt.', 'Hon.', 'Judge', 'Rabbi', 'Imam',
    'Sheikh', 'Sir', 'Dame',
)

# Canonical generational and professional suffixes
SUFFIXES = (
    'Jr.', 'Sr.', 'II', 'III', 'IV', 'PhD', 'MD', 'Esq.', 'JD', 'LLM', 'MBA',
    'RN', 'DDS', 'DVM', 'CFA', 'CPA', 'PE', 'PMP', 'Emeritus', 'Ret.',
)

# Generational markers that let a segment with digits through the person gate
GENERATIONAL_SUFFIXES = frozenset(['II', 'III', 'IV', 'V', 'JR', 'SR'])

# Designations appended to a person's name that are not part of the name
FIDUCIARY_DESIGNATIONS = (
    'AS TRUSTEE', 'AS TTEE', 'TRUSTEES', 'TRUSTEE', 'TTEE', 'ET AL', 'ET UX',
    'ET VIR', 'CUSTODIAN',
)


def _normalize_keywords(words):
    return frozenset(w.strip().upper() for w in words if w and w.strip())


@dataclass(frozen=True)
class Vocabulary:
    company_keywords: FrozenSet[str] = COMPANY_KEYWORDS
    estate_keywords: FrozenSet[str] = ESTATE_KEYWORDS
    prefixes: Tuple[str, ...] = PREFIXES
    suffixes: Tuple[str, ...] = SUFFIXES
    generational_suffixes: FrozenSet[str] = GENERATIONAL_SUFFIXES
    fiduciary_designations: Tuple[str, ...] = FIDUCIARY_DESIGNATIONS

    def extend(self, company_keywords: Iterable[str] = ()) -> 'Vocabulary':
        """Return a copy with extra organization keywords merged in."""
        extra = _normalize_keywords(company_keywords)
        if not extra:
            return self
        return replace(self, company_keywords=self.company_keywords | extra)

    def find_prefix(self, token):
        """Canonical prefix for ``token`` or None."""
        return _lookup(token, self.prefixes)

    def find_suffix(self, token):
        """Canonical suffix for ``token`` or None."""
        return _lookup(token, self.suffixes)


def _lookup(token, table):
    if not token:
        return None
    wanted = token.lower().rstrip('.')
    for canonical in table:
        if canonical.lower().rstrip('.') == wanted:
            return canonical
    return None


DEFAULT_VOCABULARY = Vocabulary()
