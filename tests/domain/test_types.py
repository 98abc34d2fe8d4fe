"""Tests for the Kind enum."""

from condperiod.domain.types import Kind


def test_kind_members_and_tags() -> None:
    assert {k.value for k in Kind} == {"C", "D"}


def test_kind_is_str() -> None:
    """StrEnum members compare equal to their compact-form tag."""
    assert Kind.CATEGORY == "C"
    assert Kind.DURATION == "D"
    assert Kind("C") is Kind.CATEGORY
