"""
Mock payment endpoint
"""
import secrets
import string
import time
from fastapi import APIRouter, Depends
from roomnest.core.dependencies import get_current_user
from roomnest.core.errors import ValidationError
from roomnest.models import User
from roomnest.schemas import MockPaymentRequest
from roomnest.utils.datetime_utils import utcnow

router = APIRouter(prefix="/payments", tags=["payments"])

BASE36 = string.digits + string.ascii_lowercase


def mock_payment_id() -> str:
    suffix = ''.join(secrets.choice(BASE36) for _ in range(9))
    return f"MOCK_PAY_{int(time.time() * 1000)}_{suffix}"


@router.post("/mock-success")
def mock_payment(payload: MockPaymentRequest, user: User = Depends(get_current_user)):
    """
    Pretend to charge ``amount`` and hand back a payment id for booking creation
    """
    if not payload.amount or payload.amount <= 0:
        raise ValidationError("Please provide a valid amount")

    return {
        "success": True,
        "message": "Mock payment processed successfully",
        "data": {
            "payment_id": mock_payment_id(),
            "status": "success",
            "amount": payload.amount,
            "timestamp": utcnow().isoformat(),
        },
    }
