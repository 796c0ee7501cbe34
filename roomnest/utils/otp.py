"""
OTP generation utilities
"""
import secrets
import string
from datetime import datetime, timedelta
from roomnest.utils.datetime_utils import utcnow


def generate_otp(length: int = 6) -> str:
    """
    Generate random OTP code

    Returns: numeric code (string), leading zeros allowed
    """
    return ''.join(secrets.choice(string.digits) for _ in range(length))


def get_otp_expiry(expiry_seconds: int = 300, now: datetime = None) -> datetime:
    """Get expiry datetime for OTP"""
    return (now or utcnow()) + timedelta(seconds=expiry_seconds)
