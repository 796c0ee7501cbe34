"""
Tests for credential validation utilities
"""
import pytest
from roomnest.core.errors import InvalidEmail, InvalidName, InvalidPhone, WeakPassword
from roomnest.utils.validators import (
    is_valid_phone,
    password_strength,
    validate_email,
    validate_name,
    validate_password,
    validate_phone,
)


def test_valid_phone_plain_format():
    """Test valid ten-digit mobile number"""
    assert validate_phone("9876543210") == "+919876543210"


@pytest.mark.parametrize("raw", [
    "+919876543210",
    "919876543210",
    "98765 43210",
    "+91 98765-43210",
    " 9876-543-210 ",
])
def test_phone_formats_collide_to_canonical(raw):
    """Prefix and spacing variants all map to one canonical number"""
    assert validate_phone(raw) == "+919876543210"


@pytest.mark.parametrize("raw", ["5876543210", "98765432", "98765432101", "+929876543210", "abcdefghij", ""])
def test_invalid_phone(raw):
    with pytest.raises(InvalidPhone):
        validate_phone(raw)


def test_is_valid_phone_helper():
    """Test is_valid_phone helper"""
    assert is_valid_phone("9876543210") is True
    assert is_valid_phone("123") is False


def test_validate_email_normalizes():
    assert validate_email("  Asha@Example.COM ") == "asha@example.com"


@pytest.mark.parametrize("raw", ["asha", "asha@example", "asha @example.com", "@example.com"])
def test_invalid_email(raw):
    with pytest.raises(InvalidEmail):
        validate_email(raw)


def test_validate_name_trims():
    assert validate_name("  Asha Rao ") == "Asha Rao"


@pytest.mark.parametrize("raw", ["A", "  a ", "R2D2", "Asha-Rao"])
def test_invalid_name(raw):
    with pytest.raises(InvalidName):
        validate_name(raw)


def test_strong_password_accepted():
    assert validate_password("Secret@123") == "Secret@123"


def test_weak_password_reports_every_rule():
    with pytest.raises(WeakPassword) as exc_info:
        validate_password("abc")
    errors = exc_info.value.errors
    assert len(errors) == 4
    assert any("8 characters" in e for e in errors)
    assert any("uppercase" in e for e in errors)
    assert any("number" in e for e in errors)
    assert any("special character" in e for e in errors)


def test_password_missing_only_symbol():
    with pytest.raises(WeakPassword) as exc_info:
        validate_password("Secret1234")
    assert exc_info.value.errors == ["Password must contain at least one special character"]


def test_password_strength_scale():
    assert password_strength("") == 0
    assert password_strength("abcdefgh") == 1
    assert password_strength("Abcdefgh1") == 3
    assert password_strength("Abcdefgh1234!") == 4
