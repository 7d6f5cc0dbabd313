import logging
import os
import re
import sys
import time

# Elephant person schema pattern for first/last/middle names
NAME_PATTERN = re.compile(r"^[A-Z][a-z]*([ \-',.][A-Za-z][a-z]*)*$")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def normalize_space(text):
    """Collapse runs of whitespace (including nbsp) into single spaces"""
    return re.sub(r"\s+", " ", (text or "").replace("\u00a0", " ")).strip()


def title_case_name(text):
    """
    Re-case a name part: capital letter at the start of every letter run,
    lowercase elsewhere. Returns None when the result does not match
    NAME_PATTERN.

    Examples:
        "SMITH" -> "Smith"
        "o'neil" -> "O'Neil"
        "MARY-ANN" -> "Mary-Ann"
    """
    if not text:
        return None

    cleaned = re.sub(r"[^a-zA-Z\s\-',.]", "", text.strip()).lower()
    cleaned = re.sub(r"\s+", " ", cleaned)
    # "st. john" -> "st john", then drop the remaining periods
    cleaned = re.sub(r"\.\s+", " ", cleaned).replace(".", "")
    cleaned = re.sub(r"[\-',]{2,}", " ", cleaned)
    cleaned = re.sub(r"^[\s\-',.]+|[\s\-',.]+$", "", cleaned)
    if not cleaned:
        return None

    result = re.sub(r"[a-z]+", lambda m: m.group(0).capitalize(), cleaned)
    if not NAME_PATTERN.match(result):
        logger.debug(f"Invalid name after formatting: {result!r}")
        return None
    return result


def title_case_company(text):
    """Title-case an organization name the way the owner schema stores it"""
    return normalize_space(text).title()


def setup_logging(level="INFO", logs_dir=None):
    """
    Send detailed logs to logs/owner_mapping_<ts>.log and warnings to stdout.

    Returns the log file path.
    """
    logs_dir = logs_dir or os.path.join(os.path.abspath("."), "logs")
    os.makedirs(logs_dir, exist_ok=True)
    log_file_path = os.path.join(logs_dir, f"owner_mapping_{int(time.time())}.log")

    file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logging.basicConfig(level=level, handlers=[file_handler, console_handler], force=True)
    return log_file_path
