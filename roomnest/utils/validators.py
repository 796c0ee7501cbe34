"""
Credential validation utilities

Pure functions: each returns the normalized value or raises its own error.
"""
import re
from roomnest.core.errors import InvalidName, InvalidEmail, InvalidPhone, WeakPassword

EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
NAME_REGEX = re.compile(r"^[a-zA-Z\s]+$")
# Indian mobile: optional +91/91, then 6-9 and nine more digits
PHONE_REGEX = re.compile(r"^(\+91|91)?([6-9]\d{9})$")
PASSWORD_SYMBOLS = '!@#$%^&*(),.?":{}|<>'
PASSWORD_MIN_LENGTH = 8


def _has_symbol(password: str) -> bool:
    return any(ch in PASSWORD_SYMBOLS for ch in password)


def validate_name(name: str) -> str:
    """Return the trimmed name"""
    name = (name or "").strip()
    if len(name) < 2:
        raise InvalidName("Name must be at least 2 characters long")
    if not NAME_REGEX.match(name):
        raise InvalidName("Name can only contain letters and spaces")
    return name


def validate_email(email: str) -> str:
    """Return the lower-cased, trimmed email"""
    email = (email or "").strip()
    if not EMAIL_REGEX.match(email):
        raise InvalidEmail()
    return email.lower()


def validate_phone(phone: str) -> str:
    """
    Validate Indian mobile number

    Returns: canonical +91XXXXXXXXXX
    Accepts: +91XXXXXXXXXX, 91XXXXXXXXXX or XXXXXXXXXX, with spaces/dashes
    """
    cleaned = re.sub(r"[\s-]", "", phone or "")
    match = PHONE_REGEX.match(cleaned)
    if not match:
        raise InvalidPhone()
    return f"+91{match.group(2)}"


def is_valid_phone(phone: str) -> bool:
    """Quick validation check"""
    try:
        validate_phone(phone)
    except InvalidPhone:
        return False
    return True


def password_errors(password: str) -> list:
    """Every rule ``password`` violates, in a stable order"""
    errors = []
    if len(password) < PASSWORD_MIN_LENGTH:
        errors.append(f"Password must be at least {PASSWORD_MIN_LENGTH} characters long")
    if not re.search(r"[A-Z]", password):
        errors.append("Password must contain at least one uppercase letter")
    if not re.search(r"[a-z]", password):
        errors.append("Password must contain at least one lowercase letter")
    if not re.search(r"[0-9]", password):
        errors.append("Password must contain at least one number")
    if not _has_symbol(password):
        errors.append("Password must contain at least one special character")
    return errors


def validate_password(password: str) -> str:
    errors = password_errors(password or "")
    if errors:
        raise WeakPassword(errors=errors, strength=password_strength(password or ""))
    return password


def password_strength(password: str) -> int:
    """
    Calculate password strength (0-4), advisory only
    0 = very weak, 4 = very strong
    """
    strength = 0
    if len(password) >= 8:
        strength += 1
    if len(password) >= 12:
        strength += 1
    if re.search(r"[A-Z]", password) and re.search(r"[a-z]", password):
        strength += 1
    if re.search(r"[0-9]", password):
        strength += 1
    if _has_symbol(password):
        strength += 1
    return min(strength, 4)
