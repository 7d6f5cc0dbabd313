import pytest

from owner_mapping.classifier import (
    Outcome,
    classify_segment,
    has_acronym_slash,
    has_company_keyword,
    is_organization,
    looks_like_person,
)
from owner_mapping.vocabulary import DEFAULT_VOCABULARY


@pytest.mark.parametrize("name", [
    "ACME PROPERTIES LLC",
    "XYZ TRUST",
    "Smith Holdings L.L.C.",
    "FIRST BAPTIST CHURCH",
    "DEPARTMENT OF TRANSPORTATION",
    "LEE COUNTY",
    "WELLS FARGO BANK N.A.",
    "SMITH JOHN REVOCABLE TRUST",
])
def test_company_keywords(name):
    assert has_company_keyword(name)


@pytest.mark.parametrize("name", [
    "JOHN COSTELLO",
    "BANKS MARY",
    "TRUSTY JOHN",
    "CHURCHILL WINSTON",
    "ESTATES JANE",
])
def test_surnames_containing_keywords_are_not_companies(name):
    assert not has_company_keyword(name)


def test_acronym_slash_notation():
    assert has_acronym_slash("TIITF/MARINE")
    assert has_acronym_slash("STATE OF FLORIDA/DEP")
    assert not has_acronym_slash("John/Mary")
    assert not has_acronym_slash("SMITH JOHN")
    assert not has_acronym_slash("SMITH JOHN/JONES MARY")
    assert not has_acronym_slash("SMITH JOHN/MARY ANN")


def test_is_organization_named_trust():
    assert is_organization("The Smith Living Trust")


@pytest.mark.parametrize("text, expected", [
    ("SMITH JOHN", True),
    ("John Q Public", True),
    ("SMITH JOHN III", True),
    ("Smith, John", True),
    ("MARY", False),
    ("SMITH JOHN 3", False),
    ("A B C D E F", False),
    ("SMITH #JOHN", False),
    ("ACME LLC", False),
])
def test_looks_like_person(text, expected):
    assert looks_like_person(text) is expected


@pytest.mark.parametrize("text, outcome", [
    ("XYZ TRUST", Outcome.ORGANIZATION),
    ("SMITH JOHN", Outcome.PERSON),
    ("SMITH ESTATE 2", Outcome.ORGANIZATION),
    ("12345", Outcome.NON_NAME),
    ("---", Outcome.NON_NAME),
    ("MARY", Outcome.SINGLE_TOKEN),
    ("SMITH @@@", Outcome.UNRECOGNIZED),
])
def test_classify_segment(text, outcome):
    assert classify_segment(text) is outcome


def test_classify_segment_first_matching_rule_wins():
    rules = (
        (lambda text, vocabulary: True, Outcome.NON_NAME),
        (lambda text, vocabulary: True, Outcome.PERSON),
    )
    assert classify_segment("SMITH JOHN", rules=rules) is Outcome.NON_NAME


def test_extended_vocabulary():
    vocabulary = DEFAULT_VOCABULARY.extend(["ranch"])
    assert not has_company_keyword("DOUBLE R RANCH")
    assert has_company_keyword("DOUBLE R RANCH", vocabulary)
    assert classify_segment("DOUBLE R RANCH", vocabulary) is Outcome.ORGANIZATION
