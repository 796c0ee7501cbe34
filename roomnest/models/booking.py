"""
Booking Model
"""
from datetime import date, datetime
from typing import Optional
from sqlalchemy import Integer, String, Boolean, Date, DateTime, ForeignKey, Float
from sqlalchemy.orm import Mapped, mapped_column, relationship
from roomnest.core.database import Base
from roomnest.utils.datetime_utils import utcnow

BOOKING_STATUSES = ("pending", "confirmed", "rejected", "cancelled", "completed")


class Booking(Base):
    __tablename__ = "bookings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)
    property_id: Mapped[int] = mapped_column(ForeignKey("properties.id"), index=True)
    check_in_date: Mapped[date] = mapped_column(Date)
    check_out_date: Mapped[date] = mapped_column(Date)
    govt_id: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    emergency_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    emergency_phone: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    payment_type: Mapped[str] = mapped_column(String(20))  # 'Mock' | 'Cash'
    payment_status: Mapped[str] = mapped_column(String(20))  # 'success' | 'pending'
    payment_id: Mapped[str] = mapped_column(String(100))
    total_amount: Mapped[float] = mapped_column(Float)
    status: Mapped[str] = mapped_column(String(20), default="pending", index=True)
    is_deleted: Mapped[bool] = mapped_column(Boolean, default=False, index=True)
    deleted_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, index=True)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, onupdate=utcnow)

    user = relationship("User", lazy="joined")
    property = relationship("Property", lazy="joined")

    def __repr__(self):
        return f"<Booking(id={self.id}, property_id={self.property_id}, status={self.status})>"
