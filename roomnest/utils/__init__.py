"""
Utility Functions
"""
from .validators import validate_name, validate_email, validate_phone, validate_password, password_strength
from .otp import generate_otp, get_otp_expiry

__all__ = [
    "validate_name",
    "validate_email",
    "validate_phone",
    "validate_password",
    "password_strength",
    "generate_otp",
    "get_otp_expiry",
]
