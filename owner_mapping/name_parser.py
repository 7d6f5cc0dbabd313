"""Person name parsing.

Token order is decided by a separate detector so counties that print
"First Last" in capitals can pass their own ``order_detector``.
"""

import logging
import re
from enum import Enum

from .records import Person
from .utils import normalize_space, title_case_name
from .vocabulary import DEFAULT_VOCABULARY

logger = logging.getLogger(__name__)


class TokenOrder(Enum):
    LAST_FIRST = "last_first"
    FIRST_LAST = "first_last"


def detect_token_order(segment):
    """
    LAST_FIRST for "SMITH, JOHN" and for all-caps segments (deed style),
    FIRST_LAST for mixed or title case.
    """
    s = normalize_space(segment)
    if re.match(r"^[^,\s]+\s*,", s):
        return TokenOrder.LAST_FIRST
    if s == s.upper() and re.search(r"[A-Z]", s):
        return TokenOrder.LAST_FIRST
    return TokenOrder.FIRST_LAST


def tokenize(segment):
    return normalize_space(segment).replace(",", " ").split()


def build_person(first, last, middle=None, prefix=None, suffix=None):
    """Re-case the parts into a Person; None when any part fails validation"""
    first_name = title_case_name(first)
    last_name = title_case_name(last)
    if not first_name or not last_name:
        return None
    middle_name = None
    if middle:
        middle_name = title_case_name(middle)
        if not middle_name:
            return None
    return Person(
        first_name=first_name,
        last_name=last_name,
        middle_name=middle_name,
        prefix_name=prefix,
        suffix_name=suffix,
    )


def parse_person(segment, vocabulary=DEFAULT_VOCABULARY, order_detector=detect_token_order):
    """Parse one owner segment into a Person, or None if it can't be done"""
    tokens = tokenize(segment)
    if not tokens:
        return None

    prefix = vocabulary.find_prefix(tokens[0])
    if prefix:
        tokens = tokens[1:]

    suffix = None
    for i in range(len(tokens) - 1, -1, -1):
        suffix = vocabulary.find_suffix(tokens[i])
        if suffix:
            tokens = tokens[:i] + tokens[i + 1:]
            break

    if len(tokens) < 2:
        return None

    if order_detector(segment) is TokenOrder.LAST_FIRST:
        last, first, middle = tokens[0], tokens[1], tokens[2:]
    else:
        first, last, middle = tokens[0], tokens[-1], tokens[1:-1]

    person = build_person(first, last, " ".join(middle), prefix, suffix)
    if person is None:
        logger.debug(f"Could not build person from {segment!r}")
    return person
