"""Owner text classification and ownership timelines for property records."""

from .owner_processor import OwnerProcessor, OwnershipHistory, build_owners_by_date
from .records import CURRENT, Company, InvalidOwner, InvalidReason, Person
from .vocabulary import DEFAULT_VOCABULARY, Vocabulary

__all__ = [
    "CURRENT",
    "Company",
    "DEFAULT_VOCABULARY",
    "InvalidOwner",
    "InvalidReason",
    "OwnerProcessor",
    "OwnershipHistory",
    "Person",
    "Vocabulary",
    "build_owners_by_date",
]
