"""Owner text cleanup and joint-owner splitting."""

import html
import logging
import re

from .utils import normalize_space
from .vocabulary import DEFAULT_VOCABULARY

logger = logging.getLogger(__name__)

# F/K/A, FKA, F K A, A/K/A, AKA, A K A and the spelled-out forms
AKA_MARKER = (
    r"(?:F\s*/\s*K\s*/\s*A|FKA|F\s+K\s+A|A\s*/\s*K\s*/\s*A|AKA|A\s+K\s+A"
    r"|FORMERLY\s+KNOWN\s+AS|ALSO\s+KNOWN\s+AS)"
)
AKA_PATTERN = re.compile(r"(?:^|\s)" + AKA_MARKER + r"(?=\s|$)", re.IGNORECASE)

ANNOTATION_PATTERN = re.compile(r"\s*[(\[][^)\]]*[)\]]\s*")
JOINT_SEPARATOR = re.compile(r"\s*(?:&|\band\b|/)\s*", re.IGNORECASE)
TRUST_WORD = re.compile(r"\btrust\b", re.IGNORECASE)
TRUSTEE_WORD = re.compile(r"\b(?:trustees?|ttee)\b", re.IGNORECASE)


def strip_aka(text):
    """
    Keep only the name in force before a formerly/also-known-as marker.

    "GRACE F/K/A RUSH" -> "GRACE". A marker at the very start is left alone
    and only the first marker counts.
    """
    match = AKA_PATTERN.search(text)
    if not match or match.start() == 0:
        return text
    logger.debug(f"Dropping alias from {text!r}")
    return normalize_space(text[:match.start()])


def clean_owner_text(raw):
    """Clean a raw owner string before it is split into joint owners"""
    text = normalize_space(html.unescape(raw or ""))
    text = normalize_space(ANNOTATION_PATTERN.sub(" ", text))
    text = strip_aka(text)
    # Dangling separators and the period of a trailing abbreviation
    text = re.sub(r"^[\s&,;/]+", "", text)
    text = re.sub(r"[\s&,;/.]+$", "", text)
    return text


def split_joint_owners(text):
    """Split on '&', a standalone 'and' or '/'; no separator returns [text]"""
    if not text:
        return []
    parts = [normalize_space(p) for p in JOINT_SEPARATOR.split(text)]
    parts = [p for p in parts if p]
    return parts or [text]


def strip_fiduciary_designation(segment, vocabulary=DEFAULT_VOCABULARY):
    """Drop 'TRUSTEE', 'ET AL' and friends trailing a person's name"""
    if TRUST_WORD.search(segment):
        return segment
    for designation in vocabulary.fiduciary_designations:
        words = r"\s+".join(re.escape(w) for w in designation.split())
        pattern = re.compile(r"\s+" + words + r"\b.*$", re.IGNORECASE)
        stripped = pattern.sub("", segment)
        if stripped != segment:
            return normalize_space(stripped)
    return segment


def clean_segment(segment, vocabulary=DEFAULT_VOCABULARY):
    """Per-owner cleanup applied after splitting"""
    text = normalize_space(ANNOTATION_PATTERN.sub(" ", segment))
    text = text.rstrip(".").strip()
    text = strip_aka(text)
    return strip_fiduciary_designation(text, vocabulary)


def is_truncated_trust(text):
    """True for lines naming a trustee whose trust name was cut off"""
    return bool(TRUSTEE_WORD.search(text)) and not TRUST_WORD.search(text)
