"""
Business Services
"""
from .auth import AuthService
from .otp import OtpService, purge_expired_otps
from .bookings import BookingService
from .properties import PropertyService

__all__ = ["AuthService", "OtpService", "purge_expired_otps", "BookingService", "PropertyService"]
