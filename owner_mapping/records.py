"""Owner record types produced by the owner processor."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .utils import normalize_space

CURRENT = "current"

logger = logging.getLogger(__name__)


class InvalidReason(str, Enum):
    NON_NAME = "non_name"
    INSUFFICIENT_PARTS = "insufficient_parts"
    COULD_NOT_PARSE_PERSON = "could_not_parse_person"
    TRUNCATED_TRUST_DESIGNATION = "truncated_trust_designation"
    UNRECOGNIZED_OWNER_FORMAT = "unrecognized_owner_format"
    INVALID_SHARED_LAST_NAME = "invalid_shared_last_name"


@dataclass(frozen=True)
class Person:
    first_name: str
    last_name: str
    middle_name: Optional[str] = None
    prefix_name: Optional[str] = None
    suffix_name: Optional[str] = None

    type = "person"

    def identity_key(self):
        parts = [self.first_name, self.middle_name, self.last_name]
        joined = " ".join(normalize_space(p) for p in parts if p)
        return "person|" + joined.lower()

    def to_dict(self):
        return {
            'type': self.type,
            'first_name': self.first_name,
            'last_name': self.last_name,
            'middle_name': self.middle_name,
            'prefix_name': self.prefix_name,
            'suffix_name': self.suffix_name,
        }


@dataclass(frozen=True)
class Company:
    name: str

    type = "company"

    def identity_key(self):
        return "company|" + normalize_space(self.name).lower()

    def to_dict(self):
        return {'type': self.type, 'name': self.name}


@dataclass(frozen=True)
class InvalidOwner:
    raw: str
    reason: InvalidReason

    def to_dict(self):
        return {'raw': self.raw, 'reason': self.reason.value}


def deduplicate_owners(owners_list):
    """Keep the first owner for each identity key, preserving order"""
    unique_owners = []
    seen = set()
    for owner in owners_list:
        key = owner.identity_key()
        if key in seen:
            logger.debug(f"Dropping duplicate owner {key}")
            continue
        seen.add(key)
        unique_owners.append(owner)
    return unique_owners
