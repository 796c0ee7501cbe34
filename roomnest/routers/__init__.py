"""
API Routers
"""
from .auth import router as auth_router
from .properties import router as properties_router
from .bookings import router as bookings_router
from .payments import router as payments_router

__all__ = ["auth_router", "properties_router", "bookings_router", "payments_router"]
