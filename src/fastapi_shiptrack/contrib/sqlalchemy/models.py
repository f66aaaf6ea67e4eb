"""SQLAlchemy models mirroring the platform state."""

from __future__ import annotations

from sqlalchemy import JSON, BigInteger, Float, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """SQLAlchemy declarative base."""


class UserModel(Base):
    __tablename__ = "shiptrack_users"

    identity: Mapped[str] = mapped_column(String(128), primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    email: Mapped[str] = mapped_column(String(255))
    phone: Mapped[str] = mapped_column(String(32))
    role: Mapped[str] = mapped_column(String(32))
    created_at: Mapped[int] = mapped_column(BigInteger)
    is_active: Mapped[bool] = mapped_column(default=True)


class DriverModel(Base):
    __tablename__ = "shiptrack_drivers"

    identity: Mapped[str] = mapped_column(String(128), primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    phone: Mapped[str] = mapped_column(String(32))
    vehicle_info: Mapped[dict] = mapped_column(JSON)
    current_location: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    is_available: Mapped[bool] = mapped_column(default=True)
    rating: Mapped[float] = mapped_column(Float, default=5.0)
    total_deliveries: Mapped[int] = mapped_column(default=0)
    joined_at: Mapped[int] = mapped_column(BigInteger)


class ShipmentModel(Base):
    """Shipment row; nested records and tracking history stored as JSON."""

    __tablename__ = "shiptrack_shipments"

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    sender_id: Mapped[str] = mapped_column(String(128), index=True)
    recipient_name: Mapped[str] = mapped_column(String(255))
    recipient_phone: Mapped[str] = mapped_column(String(32))
    pickup_address: Mapped[dict] = mapped_column(JSON)
    delivery_address: Mapped[dict] = mapped_column(JSON)
    package_details: Mapped[dict] = mapped_column(JSON)
    status: Mapped[str] = mapped_column(String(32), default="created")
    driver_id: Mapped[str | None] = mapped_column(
        String(128), nullable=True, index=True
    )
    created_at: Mapped[int] = mapped_column(BigInteger)
    updated_at: Mapped[int] = mapped_column(BigInteger)
    estimated_delivery: Mapped[int | None] = mapped_column(
        BigInteger, nullable=True
    )
    actual_delivery: Mapped[int | None] = mapped_column(
        BigInteger, nullable=True
    )
    tracking_history: Mapped[list] = mapped_column(JSON)
    payment_status: Mapped[str] = mapped_column(String(32), default="pending")
    cost: Mapped[float] = mapped_column(Float)


class ReturnRequestModel(Base):
    __tablename__ = "shiptrack_return_requests"

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    shipment_id: Mapped[str] = mapped_column(String(32), index=True)
    requester_id: Mapped[str] = mapped_column(String(128), index=True)
    reason: Mapped[str] = mapped_column(Text)
    status: Mapped[str] = mapped_column(String(32), default="requested")
    created_at: Mapped[int] = mapped_column(BigInteger)
    processed_at: Mapped[int | None] = mapped_column(
        BigInteger, nullable=True
    )


class CounterModel(Base):
    """Last issued value of an identifier counter."""

    __tablename__ = "shiptrack_counters"

    name: Mapped[str] = mapped_column(String(32), primary_key=True)
    value: Mapped[int] = mapped_column(BigInteger, default=0)
