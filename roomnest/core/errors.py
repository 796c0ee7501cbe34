"""
Typed application errors

Every service raises one of these; the HTTP boundary in ``roomnest.main``
turns them into the JSON envelope with the matching status code.
"""
from typing import Optional


class AppError(Exception):
    status_code: int = 500
    message: str = "Server Error"

    def __init__(self, message: Optional[str] = None, errors: Optional[list] = None, **extra):
        self.message = message or self.message
        self.errors = errors
        self.extra = extra
        super().__init__(self.message)


# ==================== Validation (400) ====================

class ValidationError(AppError):
    status_code = 400
    message = "Invalid data provided"


class MissingFields(ValidationError):
    message = "Please provide all required fields"


class InvalidName(ValidationError):
    message = "Name must be at least 2 characters long"


class InvalidEmail(ValidationError):
    message = "Invalid email format"


class InvalidPhone(ValidationError):
    message = "Invalid phone number. Must be a valid Indian mobile number"


class WeakPassword(ValidationError):
    message = "Password does not meet requirements"


class DuplicateEmail(ValidationError):
    message = "User already exists with this email"


class DuplicatePhone(ValidationError):
    message = "User already exists with this phone number"


class InvalidOrExpiredOTP(ValidationError):
    message = "Invalid or expired OTP"


class InvalidPaymentState(ValidationError):
    message = "Invalid payment information"


class InvalidDates(ValidationError):
    message = "Check-out date must be after check-in date"


class InvalidStatus(ValidationError):
    message = "Please provide a valid status (pending, confirmed, rejected, cancelled, completed)"


# ==================== State conflicts (400) ====================

class StateConflict(AppError):
    status_code = 400
    message = "Operation not allowed in the current state"


class NoBedsAvailable(StateConflict):
    message = "No beds available for this property"


class BookingDeleted(StateConflict):
    message = "This booking has been cancelled and cannot be updated"


class AlreadyCancelled(StateConflict):
    message = "Booking is already cancelled"


class NotCancelled(StateConflict):
    message = "Booking is not cancelled"


class AlreadyDeleted(StateConflict):
    message = "Property is already deleted"


class NotDeleted(StateConflict):
    message = "Property is not deleted"


# ==================== Authentication (401) ====================

class AuthenticationError(AppError):
    status_code = 401
    message = "Not authenticated"


class InvalidCredentials(AuthenticationError):
    message = "Invalid credentials"


class TokenInvalid(AuthenticationError):
    message = "Invalid token"


class TokenExpired(AuthenticationError):
    message = "Token expired"


# ==================== Authorization (403) ====================

class Forbidden(AppError):
    status_code = 403
    message = "You are not authorized to perform this action"


class AccountLocked(Forbidden):
    message = "Account is temporarily locked"


# ==================== Not found (404) ====================

class NotFound(AppError):
    status_code = 404
    message = "Resource not found"


class UserNotFound(NotFound):
    message = "User not found"


class PropertyNotFound(NotFound):
    message = "Property not found"


class BookingNotFound(NotFound):
    message = "Booking not found"
