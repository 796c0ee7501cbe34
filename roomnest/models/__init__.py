"""
Database Models
"""
from .user import User
from .property import Property
from .booking import Booking, BOOKING_STATUSES
from .otp import OtpCode

__all__ = [
    "User",
    "Property",
    "Booking",
    "BOOKING_STATUSES",
    "OtpCode",
]

# Export Base from database
from roomnest.core.database import Base
