"""
Booking lifecycle

Status moves freely between pending, confirmed, rejected, cancelled and
completed at the property owner's request. Soft delete overlays any status:
a deleted booking is frozen as cancelled until the owner restores it, which
resets it to pending.
"""
import logging
import math
from sqlalchemy.orm import Session
from roomnest.core.errors import (
    AlreadyCancelled,
    BookingDeleted,
    BookingNotFound,
    Forbidden,
    InvalidDates,
    InvalidPaymentState,
    InvalidStatus,
    MissingFields,
    NoBedsAvailable,
    NotCancelled,
    PropertyNotFound,
)
from roomnest.models import Booking, Property, User, BOOKING_STATUSES
from roomnest.schemas import BookingCreate
from roomnest.utils.datetime_utils import utcnow

logger = logging.getLogger(__name__)

# Allowed (payment type, payment status) pairs
PAYMENT_STATES = {
    "Cash": "pending",
    "Mock": "success",
}


def stay_length_days(check_in, check_out) -> int:
    """Whole days between the two dates, rounded up"""
    return math.ceil((check_out - check_in).total_seconds() / 86400)


def calculate_total_amount(days: int, price_per_month: float) -> int:
    return math.ceil((days / 30) * price_per_month)


def derive_booking_status(payment_type: str, payment_status: str) -> str:
    if payment_type == "Mock" and payment_status == "success":
        return "confirmed"
    return "pending"


def check_payment_state(payment_type: str, payment_status: str):
    if payment_type not in PAYMENT_STATES:
        raise InvalidPaymentState('Payment type must be either "Mock" or "Cash"')
    expected = PAYMENT_STATES[payment_type]
    if payment_status != expected:
        raise InvalidPaymentState(f'{payment_type} payment status must be "{expected}"')


class BookingService:
    def __init__(self, db: Session):
        self.db = db

    # ==================== Reads ====================

    def _active_bookings(self):
        return self.db.query(Booking).join(Property, Booking.property_id == Property.id).filter(
            Booking.is_deleted == False,  # noqa: E712
            Property.is_deleted == False  # noqa: E712
        )

    def list_for_user(self, user: User) -> list[Booking]:
        return self._active_bookings().filter(
            Booking.user_id == user.id
        ).order_by(Booking.created_at.desc(), Booking.id.desc()).all()

    def list_for_property(self, actor: User, property_id: int) -> list[Booking]:
        prop = self.db.query(Property).filter(Property.id == property_id).first()
        if not prop or prop.is_deleted:
            raise PropertyNotFound()
        if prop.owner_id != actor.id:
            raise Forbidden("You are not authorized to view bookings for this property")

        return self._active_bookings().filter(
            Booking.property_id == property_id
        ).order_by(Booking.created_at.desc(), Booking.id.desc()).all()

    def list_for_owner(self, actor: User) -> list[Booking]:
        return self._active_bookings().filter(
            Property.owner_id == actor.id
        ).order_by(Booking.created_at.desc(), Booking.id.desc()).all()

    def get_booking(self, booking_id: int) -> Booking:
        booking = self.db.query(Booking).filter(Booking.id == booking_id).first()
        if not booking:
            raise BookingNotFound()
        return booking

    # ==================== Mutations ====================

    def create_booking(self, user: User, data: BookingCreate) -> Booking:
        if not (data.property and data.check_in_date and data.check_out_date):
            raise MissingFields("Please provide property, check-in date, and check-out date")

        if data.emergency_name and not data.emergency_phone:
            raise MissingFields("Please provide emergency contact phone number")

        payment = data.payment_info
        if not payment or not (payment.type and payment.status and payment.id):
            raise MissingFields("Please provide complete payment information (type, status, id)")

        check_payment_state(payment.type, payment.status)

        if data.check_out_date <= data.check_in_date:
            raise InvalidDates()

        prop = self.db.query(Property).filter(Property.id == data.property).first()
        if not prop or prop.is_deleted:
            raise PropertyNotFound()

        # Beds are checked, not reserved: two concurrent requests can both take the last bed
        if prop.available_beds == 0:
            raise NoBedsAvailable()

        days = stay_length_days(data.check_in_date, data.check_out_date)
        total_amount = payment.amount or calculate_total_amount(days, prop.price_per_month)

        booking = Booking(
            user_id=user.id,
            property_id=prop.id,
            check_in_date=data.check_in_date,
            check_out_date=data.check_out_date,
            govt_id=data.govt_id or None,
            emergency_name=data.emergency_name or None,
            emergency_phone=data.emergency_phone or None,
            payment_type=payment.type,
            payment_status=payment.status,
            payment_id=payment.id,
            total_amount=total_amount,
            status=derive_booking_status(payment.type, payment.status),
            is_deleted=False,
            created_at=utcnow(),
        )
        self.db.add(booking)
        self.db.commit()
        self.db.refresh(booking)

        logger.info("[BOOKING] Created booking %s on property %s (%s, %s)",
                    booking.id, prop.id, booking.status, booking.total_amount)
        return booking

    def update_status(self, actor: User, booking_id: int, status: str) -> Booking:
        """
        Owner-driven status change; any state may follow any other
        """
        if not status or status not in BOOKING_STATUSES:
            raise InvalidStatus()

        booking = self.get_booking(booking_id)
        if booking.is_deleted:
            raise BookingDeleted()
        if booking.property.owner_id != actor.id:
            raise Forbidden("You are not authorized to update this booking")

        booking.status = status
        self.db.commit()
        self.db.refresh(booking)
        return booking

    def cancel_booking(self, actor: User, booking_id: int) -> Booking:
        """
        Soft delete by the booking's own user
        """
        booking = self.get_booking(booking_id)
        if booking.is_deleted:
            raise AlreadyCancelled()
        if booking.user_id != actor.id:
            raise Forbidden("You are not authorized to cancel this booking")

        booking.is_deleted = True
        booking.deleted_at = utcnow()
        booking.status = "cancelled"
        self.db.commit()
        self.db.refresh(booking)

        logger.info("[BOOKING] Booking %s cancelled by user %s", booking.id, actor.id)
        return booking

    def restore_booking(self, actor: User, booking_id: int) -> Booking:
        """
        Undo a cancellation; the booking always comes back as pending
        """
        booking = self.get_booking(booking_id)
        if not booking.is_deleted:
            raise NotCancelled()
        if booking.property.owner_id != actor.id:
            raise Forbidden("You are not authorized to restore this booking")

        booking.is_deleted = False
        booking.deleted_at = None
        booking.status = "pending"
        self.db.commit()
        self.db.refresh(booking)

        logger.info("[BOOKING] Booking %s restored by owner %s", booking.id, actor.id)
        return booking
