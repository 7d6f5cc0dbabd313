"""Person / organization classification for cleaned owner segments.

Classification is an ordered table of ``(predicate, outcome)`` rules; the
first predicate that matches decides. Every predicate takes the cleaned
segment and a Vocabulary.
"""

import logging
import re
from enum import Enum
from functools import lru_cache

from .vocabulary import DEFAULT_VOCABULARY

logger = logging.getLogger(__name__)

NAME_TOKEN = re.compile(r"^[A-Za-z][A-Za-z'.,-]*$")
NAMED_TRUST = re.compile(r"\b(?:revocable|living)\s+trust\b", re.IGNORECASE)
# TIITF/MARINE, STATE OF FLORIDA/DEP: one whole side of the slash is a 2-5 letter acronym
ACRONYM = re.compile(r"^[A-Z]{2,5}$")


class Outcome(Enum):
    ORGANIZATION = "organization"
    PERSON = "person"
    NON_NAME = "non_name"
    SINGLE_TOKEN = "single_token"
    UNRECOGNIZED = "unrecognized"


@lru_cache(maxsize=None)
def _keyword_pattern(keywords):
    alternatives = sorted((re.escape(kw) for kw in keywords), key=len, reverse=True)
    return re.compile(
        r"(?<![A-Za-z0-9])(?:" + "|".join(alternatives) + r")\.?(?![A-Za-z0-9])",
        re.IGNORECASE,
    )


def has_company_keyword(text, vocabulary=DEFAULT_VOCABULARY):
    if not text or not vocabulary.company_keywords:
        return False
    return bool(_keyword_pattern(vocabulary.company_keywords).search(text))


def has_acronym_slash(text, vocabulary=DEFAULT_VOCABULARY):
    """Institutional co-ownership notation such as 'TIITF/MARINE'"""
    sides = [side.strip() for side in (text or "").split("/")]
    if len(sides) < 2:
        return False
    return any(ACRONYM.match(side) for side in sides)


def is_organization(text, vocabulary=DEFAULT_VOCABULARY):
    return (
        has_company_keyword(text, vocabulary)
        or bool(NAMED_TRUST.search(text or ""))
        or has_acronym_slash(text, vocabulary)
    )


def has_stray_digits(text, vocabulary=DEFAULT_VOCABULARY):
    if not re.search(r"\d", text):
        return False
    tokens = {t.upper().rstrip('.') for t in text.split()}
    return not tokens & vocabulary.generational_suffixes


def looks_like_person(text, vocabulary=DEFAULT_VOCABULARY):
    """2-5 letter-led tokens, no digits; organizations never pass"""
    if not text or is_organization(text, vocabulary):
        return False
    if has_stray_digits(text, vocabulary):
        return False
    tokens = text.split()
    if len(tokens) < 2 or len(tokens) > 5:
        return False
    return all(NAME_TOKEN.match(token) for token in tokens)


def mentions_estate(text, vocabulary=DEFAULT_VOCABULARY):
    words = {w.upper() for w in re.findall(r"[A-Za-z]+", text)}
    return bool(words & vocabulary.estate_keywords)


def is_non_name(text, vocabulary=DEFAULT_VOCABULARY):
    return not re.search(r"[A-Za-z]", text) or has_stray_digits(text, vocabulary)


def is_single_token(text, vocabulary=DEFAULT_VOCABULARY):
    return len(text.split()) == 1


RULES = (
    (is_organization, Outcome.ORGANIZATION),
    (looks_like_person, Outcome.PERSON),
    (mentions_estate, Outcome.ORGANIZATION),
    (is_non_name, Outcome.NON_NAME),
    (is_single_token, Outcome.SINGLE_TOKEN),
)


def classify_segment(text, vocabulary=DEFAULT_VOCABULARY, rules=RULES):
    """Return the Outcome of the first matching rule"""
    for predicate, outcome in rules:
        if predicate(text, vocabulary):
            logger.debug(f"{text!r} -> {outcome.value} ({predicate.__name__})")
            return outcome
    return Outcome.UNRECOGNIZED
