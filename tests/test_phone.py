"""Tests for phone validation and canonical form (E.164 when parseable)."""

from ccabook.domain.phone import (
    canonical_phone,
    get_default_region,
    is_valid_phone,
    set_default_region,
)


def test_canonical_with_country_code_returns_e164():
    assert canonical_phone("+6591234567", "SG") == "+6591234567"
    assert canonical_phone("+12025551234", "SG") == "+12025551234"


def test_canonical_without_country_code_uses_region():
    assert canonical_phone("91234567", "SG") == "+6591234567"
    assert canonical_phone("2025551234", "US") == "+12025551234"


def test_canonical_unparseable_falls_back_to_digits():
    assert canonical_phone("123", "SG") == "123"
    assert canonical_phone("+123", "SG") == "123"


def test_canonical_uses_default_region_when_none_given():
    previous = get_default_region()
    try:
        set_default_region("us")
        assert get_default_region() == "US"
        assert canonical_phone("2025551234") == "+12025551234"
    finally:
        set_default_region(previous)


def test_is_valid_phone():
    assert is_valid_phone("123")
    assert is_valid_phone("91234567")
    assert is_valid_phone("+6591234567")
    assert not is_valid_phone("12")
    assert not is_valid_phone("")
    assert not is_valid_phone("9123 4567")
    assert not is_valid_phone("abc")
