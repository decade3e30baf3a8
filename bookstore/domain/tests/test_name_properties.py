"""
Property-based tests for author name validation.

These tests use Hypothesis to generate arbitrary text and check that name
validation accepts exactly the trimmed, non-blank names within the length
limit, for any configured limit.
"""

from hypothesis import example, given, strategies as st

import pytest

from bookstore.domain import (
    AuthorConstants,
    DomainValidationError,
    validate_author_name,
)

MAX = AuthorConstants.MAX_NAME_LENGTH


@given(st.text(max_size=MAX).filter(lambda s: s.strip()))
@example("Victor Hugo")
def test_valid_names_are_returned_trimmed(name: str) -> None:
    assert validate_author_name(name) == name.strip()


@given(st.text(alphabet=st.characters(categories=["Zs"]), max_size=20))
def test_blank_names_are_rejected(name: str) -> None:
    with pytest.raises(DomainValidationError):
        validate_author_name(name)


@given(st.text(min_size=MAX + 1, max_size=MAX * 2).filter(lambda s: len(s.strip()) > MAX))
def test_long_names_are_rejected(name: str) -> None:
    with pytest.raises(DomainValidationError):
        validate_author_name(name)


@given(st.text(max_size=MAX), st.integers(min_value=1, max_value=MAX))
def test_validation_outcome_matches_rule(name: str, max_length: int) -> None:
    trimmed = name.strip()
    if trimmed and len(trimmed) <= max_length:
        assert validate_author_name(name, max_length) == trimmed
    else:
        with pytest.raises(DomainValidationError):
            validate_author_name(name, max_length)

