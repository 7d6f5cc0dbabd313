import logging
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from .classifier import RULES, Outcome, classify_segment, has_acronym_slash
from .cleaning import (
    clean_owner_text,
    clean_segment,
    is_truncated_trust,
    split_joint_owners,
)
from .name_parser import build_person, detect_token_order, parse_person
from .records import (
    CURRENT,
    Company,
    InvalidOwner,
    InvalidReason,
    deduplicate_owners,
)
from .utils import normalize_space, title_case_company
from .vocabulary import DEFAULT_VOCABULARY

logger = logging.getLogger(__name__)

SALE_DATE_FORMATS = ('%Y-%m-%d', '%m/%d/%Y', '%m/%d/%y')


def parse_sale_date(value):
    """Convert a sale date to YYYY-MM-DD, None if it is not a date"""
    text = normalize_space(value)
    for fmt in SALE_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date().isoformat()
        except ValueError:
            continue
    return None


class InvalidOwnerLog:
    """Collects owner segments that could not be classified or parsed"""

    def __init__(self):
        self.entries: List[InvalidOwner] = []

    def add(self, raw, reason):
        logger.info(f"Invalid owner {raw!r}: {reason.value}")
        self.entries.append(InvalidOwner(raw=raw, reason=reason))

    def __len__(self):
        return len(self.entries)

    def to_list(self):
        return [entry.to_dict() for entry in self.entries]


@dataclass(frozen=True)
class SegmentFold:
    """
    State carried from one joint-owner segment to the next.

    shared_last_name is the surname of the last person parsed in the group;
    a company resets it.
    """
    owners: Tuple = ()
    shared_last_name: Optional[str] = None

    def with_owner(self, owner, shared_last_name):
        return replace(self, owners=self.owners + (owner,), shared_last_name=shared_last_name)


@dataclass(frozen=True)
class OwnershipHistory:
    owners_by_date: Dict[str, Tuple] = field(default_factory=dict)
    invalid_owners: Tuple[InvalidOwner, ...] = ()

    @property
    def current(self):
        return self.owners_by_date.get(CURRENT, ())

    def to_dict(self):
        return {
            'owners_by_date': {
                date: [owner.to_dict() for owner in owners]
                for date, owners in self.owners_by_date.items()
            },
            'invalid_owners': [entry.to_dict() for entry in self.invalid_owners],
        }


class OwnerProcessor:
    """Turns grantee strings and current-owner lines into an OwnershipHistory"""

    def __init__(self, vocabulary=DEFAULT_VOCABULARY, order_detector=detect_token_order, rules=RULES):
        self.vocabulary = vocabulary
        self.order_detector = order_detector
        self.rules = rules

    def parse_person(self, text):
        return parse_person(text, self.vocabulary, self.order_detector)

    def resolve_segment(self, segment, fold, group_size, invalid_log):
        """Classify one joint-owner segment and return the updated fold"""
        clean = clean_segment(segment, self.vocabulary)
        if not clean:
            invalid_log.add(segment, InvalidReason.NON_NAME)
            return fold

        outcome = classify_segment(clean, self.vocabulary, self.rules)

        if outcome is Outcome.ORGANIZATION:
            return fold.with_owner(Company(name=title_case_company(clean)), None)

        if outcome is Outcome.NON_NAME:
            invalid_log.add(clean, InvalidReason.NON_NAME)
            return fold

        if outcome is Outcome.SINGLE_TOKEN:
            if fold.shared_last_name:
                person = build_person(clean, fold.shared_last_name)
                if person:
                    return fold.with_owner(person, fold.shared_last_name)
                invalid_log.add(clean, InvalidReason.INVALID_SHARED_LAST_NAME)
            elif group_size > 1:
                invalid_log.add(clean, InvalidReason.INVALID_SHARED_LAST_NAME)
            else:
                invalid_log.add(clean, InvalidReason.INSUFFICIENT_PARTS)
            return fold

        person = self.parse_person(clean)
        if person:
            return fold.with_owner(person, person.last_name)
        if outcome is Outcome.PERSON:
            invalid_log.add(clean, InvalidReason.COULD_NOT_PARSE_PERSON)
        else:
            invalid_log.add(clean, InvalidReason.UNRECOGNIZED_OWNER_FORMAT)
        return fold

    def classify_owner_text(self, raw, invalid_log):
        """
        Run one raw owner string through clean -> split -> classify.

        Segments are resolved strictly left to right; the shared surname of
        "SMITH JOHN & MARY" only exists once "SMITH JOHN" is parsed.
        Returns the owners in input order (not deduplicated).
        """
        if raw is not None and not isinstance(raw, str):
            raise TypeError(f"owner text must be a string, got {type(raw).__name__}")

        cleaned = clean_owner_text(raw)
        if not cleaned:
            return []

        if has_acronym_slash(cleaned, self.vocabulary):
            return [Company(name=title_case_company(cleaned))]

        segments = split_joint_owners(cleaned)
        fold = SegmentFold()
        for segment in segments:
            fold = self.resolve_segment(segment, fold, len(segments), invalid_log)
        return list(fold.owners)

    def classify_current_owners(self, lines, invalid_log):
        owners = []
        for line in lines:
            cleaned = clean_owner_text(line)
            if not cleaned:
                continue
            if is_truncated_trust(cleaned):
                invalid_log.add(cleaned, InvalidReason.TRUNCATED_TRUST_DESIGNATION)
                continue
            owners.extend(self.classify_owner_text(cleaned, invalid_log))
        return deduplicate_owners(owners)

    def build_owners_by_date(self, sales, current_owner_lines=()):
        """
        Build the ownership timeline for one property.

        Args:
            sales: iterable of (sale_date, grantee_text) pairs in input order
            current_owner_lines: owner lines from the property's owner block

        Returns:
            OwnershipHistory with dated buckets in ascending order followed by
            the "current" bucket
        """
        invalid_log = InvalidOwnerLog()
        by_date = {}

        for sale_date, grantee in sales:
            iso_date = parse_sale_date(sale_date)
            if not iso_date:
                logger.warning(f"Skipping sale with unreadable date {sale_date!r} ({grantee!r})")
                continue
            owners = self.classify_owner_text(grantee, invalid_log)
            by_date.setdefault(iso_date, []).extend(owners)

        owners_by_date = {
            date: tuple(deduplicate_owners(by_date[date]))
            for date in sorted(by_date)
        }

        current_owners = self.classify_current_owners(current_owner_lines, invalid_log)
        latest = owners_by_date[max(owners_by_date)] if owners_by_date else ()

        if current_owners:
            current = tuple(current_owners)
        else:
            current = latest

        # A company or trust taking title at the latest sale outranks the owner block
        if len(latest) == 1 and isinstance(latest[0], Company):
            if current != latest:
                logger.info(f"Latest grantee {latest[0].name!r} overrides current owners")
            current = latest

        owners_by_date[CURRENT] = current
        return OwnershipHistory(owners_by_date=owners_by_date, invalid_owners=tuple(invalid_log.entries))


def build_owners_by_date(sales, current_owner_lines=(), vocabulary=DEFAULT_VOCABULARY):
    return OwnerProcessor(vocabulary=vocabulary).build_owners_by_date(sales, current_owner_lines)
