"""
Booking endpoints
"""
from fastapi import APIRouter, Depends, status
from roomnest.core.dependencies import get_booking_service, get_current_user, require_owner
from roomnest.models import Booking, User
from roomnest.schemas import BookingCreate, BookingOut, BookingStatusUpdate
from roomnest.services import BookingService

router = APIRouter(prefix="/bookings", tags=["bookings"])


def booking_payload(booking: Booking) -> dict:
    return BookingOut.model_validate(booking).model_dump(mode="json")


def booking_list(bookings: list) -> dict:
    return {
        "success": True,
        "count": len(bookings),
        "data": [booking_payload(b) for b in bookings],
    }


@router.post("", status_code=status.HTTP_201_CREATED)
def create_booking(
    payload: BookingCreate,
    user: User = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service)
):
    """
    Create a booking paid by mock payment or cash on check-in
    """
    booking = service.create_booking(user, payload)
    message = (
        "Booking created successfully. Payment due on check-in."
        if booking.payment_type == "Cash"
        else "Booking confirmed! Payment successful."
    )
    return {"success": True, "message": message, "data": booking_payload(booking)}


@router.get("/my")
def my_bookings(user: User = Depends(get_current_user), service: BookingService = Depends(get_booking_service)):
    """
    Bookings made by the current user
    """
    return booking_list(service.list_for_user(user))


@router.get("/owner")
def owner_bookings(owner: User = Depends(require_owner), service: BookingService = Depends(get_booking_service)):
    """
    Bookings across every property the current owner has
    """
    return booking_list(service.list_for_owner(owner))


@router.get("/property/{property_id}")
def property_bookings(
    property_id: int,
    owner: User = Depends(require_owner),
    service: BookingService = Depends(get_booking_service)
):
    """
    Bookings for one of the owner's properties
    """
    return booking_list(service.list_for_property(owner, property_id))


@router.patch("/{booking_id}")
def update_booking_status(
    booking_id: int,
    payload: BookingStatusUpdate,
    owner: User = Depends(require_owner),
    service: BookingService = Depends(get_booking_service)
):
    """
    Owner changes a booking's status
    """
    booking = service.update_status(owner, booking_id, payload.status)
    return {"success": True, "message": "Booking status updated successfully", "data": booking_payload(booking)}


@router.delete("/{booking_id}")
def cancel_booking(
    booking_id: int,
    user: User = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service)
):
    """
    User cancels their own booking (soft delete)
    """
    service.cancel_booking(user, booking_id)
    return {"success": True, "message": "Booking cancelled successfully", "data": {}}


@router.patch("/{booking_id}/restore")
def restore_booking(
    booking_id: int,
    owner: User = Depends(require_owner),
    service: BookingService = Depends(get_booking_service)
):
    """
    Owner restores a cancelled booking
    """
    booking = service.restore_booking(owner, booking_id)
    return {"success": True, "message": "Booking restored successfully", "data": booking_payload(booking)}
