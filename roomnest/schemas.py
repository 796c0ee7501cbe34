"""
Request and response schemas
"""
from datetime import date, datetime
from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field


class CamelModel(BaseModel):
    """Accepts both snake_case field names and the camelCase aliases web clients send"""
    model_config = ConfigDict(populate_by_name=True)


# ==================== Auth ====================

class RegisterRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    password: Optional[str] = None
    role: Literal["user", "owner"] = "user"


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class SendOtpRequest(BaseModel):
    phone: Optional[str] = None


class VerifyOtpRequest(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    phone: Optional[str] = None
    code: Optional[str] = None


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone: str
    role: str
    phone_verified: bool = False


class UserSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    email: str
    phone: str


# ==================== Properties ====================

class PropertyCreate(CamelModel):
    title: Optional[str] = None
    type: Optional[str] = None
    gender: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    price_per_month: Optional[float] = Field(default=None, alias="pricePerMonth", gt=0)
    deposit: Optional[float] = Field(default=None, ge=0)
    amenities: Optional[list[str]] = None
    images: Optional[list[str]] = None
    available_beds: Optional[int] = Field(default=None, alias="availableBeds", ge=0)
    description: Optional[str] = None


class PropertyPatch(CamelModel):
    """
    Partial update for a property

    Only fields present in the request body are applied (see
    ``model_dump(exclude_unset=True)``); a present ``null`` clears a
    nullable field.
    """
    title: Optional[str] = None
    type: Optional[str] = None
    gender: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    price_per_month: Optional[float] = Field(default=None, alias="pricePerMonth", gt=0)
    deposit: Optional[float] = Field(default=None, ge=0)
    amenities: Optional[list[str]] = None
    images: Optional[list[str]] = None
    available_beds: Optional[int] = Field(default=None, alias="availableBeds", ge=0)
    description: Optional[str] = None


class PropertySummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    type: str
    city: str
    address: str
    price_per_month: float
    images: list = []
    gender: str
    owner_id: int
    is_deleted: bool = False


class PropertyOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    owner_id: int
    title: str
    type: str
    gender: str
    address: str
    city: str
    price_per_month: float
    deposit: float
    amenities: list = []
    images: list = []
    available_beds: int
    description: Optional[str] = None
    is_deleted: bool
    deleted_at: Optional[datetime] = None
    created_at: datetime
    owner: Optional[UserSummary] = None


# ==================== Bookings ====================

class PaymentInfo(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    type: Optional[str] = None
    status: Optional[str] = None
    id: Optional[str] = None
    amount: Optional[float] = None


class BookingCreate(CamelModel):
    property: Optional[int] = None
    check_in_date: Optional[date] = Field(default=None, alias="checkInDate")
    check_out_date: Optional[date] = Field(default=None, alias="checkOutDate")
    payment_info: Optional[PaymentInfo] = Field(default=None, alias="paymentInfo")
    govt_id: Optional[str] = Field(default=None, alias="govtId")
    emergency_name: Optional[str] = Field(default=None, alias="emergencyName")
    emergency_phone: Optional[str] = Field(default=None, alias="emergencyPhone")


class BookingStatusUpdate(BaseModel):
    status: Optional[str] = None


class BookingOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    property_id: int
    check_in_date: date
    check_out_date: date
    govt_id: Optional[str] = None
    emergency_name: Optional[str] = None
    emergency_phone: Optional[str] = None
    payment_type: str
    payment_status: str
    payment_id: str
    total_amount: float
    status: str
    is_deleted: bool
    deleted_at: Optional[datetime] = None
    created_at: datetime
    user: Optional[UserSummary] = None
    property: Optional[PropertySummary] = None


# ==================== Payments ====================

class MockPaymentRequest(BaseModel):
    amount: Optional[float] = None
