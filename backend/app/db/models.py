"""SQLAlchemy ORM models for the catalog, itineraries and bookings."""

import uuid
from datetime import date, datetime
from typing import Any

from sqlalchemy import (
    JSON,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship
from sqlalchemy.sql import func

# JSONB on postgres, plain JSON elsewhere (sqlite in tests)
JsonDocument = JSON().with_variant(JSONB(), "postgresql")

# Money columns come back as float rather than Decimal
Money = Numeric(10, 2, asdecimal=False)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class Profile(Base):
    """User profile - identity is owned by the external auth provider."""

    __tablename__ = "profile"

    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    email: Mapped[str | None] = mapped_column(Text, nullable=True)
    full_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    phone: Mapped[str | None] = mapped_column(Text, nullable=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    country: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    # Relationships
    roles: Mapped[list["UserRole"]] = relationship(
        "UserRole", back_populates="profile", cascade="all, delete-orphan"
    )


class UserRole(Base):
    """Role grant table."""

    __tablename__ = "user_role"
    __table_args__ = (UniqueConstraint("user_id", "role", name="uq_user_role"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("profile.user_id", ondelete="CASCADE"), nullable=False
    )
    role: Mapped[str] = mapped_column(Text, nullable=False)

    # Relationships
    profile: Mapped["Profile"] = relationship("Profile", back_populates="roles")


class RoleRequest(Base):
    """Role request table - drivers and hotel owners awaiting admin review."""

    __tablename__ = "role_request"
    __table_args__ = (Index("idx_role_request_status", "status", "created_at"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("profile.user_id", ondelete="CASCADE"), nullable=False
    )
    requested_role: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(Text, nullable=False, default="pending")
    reviewed_by: Mapped[uuid.UUID | None] = mapped_column(Uuid, nullable=True)
    reviewed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class Hotel(Base):
    """Hotel table - listings added by hotel owners."""

    __tablename__ = "hotel"
    __table_args__ = (Index("idx_hotel_category_city", "price_category", "city"),)

    hotel_id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("profile.user_id"), nullable=True
    )
    hotel_name: Mapped[str] = mapped_column(Text, nullable=False)
    stars: Mapped[int] = mapped_column(Integer, nullable=False)
    per_night_charge: Mapped[float] = mapped_column(Money, nullable=False)
    price_category: Mapped[str] = mapped_column(Text, nullable=False)
    city: Mapped[str] = mapped_column(Text, nullable=False)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    owner_email: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class Vehicle(Base):
    """Vehicle table - listings added by drivers."""

    __tablename__ = "vehicle"
    __table_args__ = (Index("idx_vehicle_type", "vehicle_type"),)

    vehicle_id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("profile.user_id"), nullable=True
    )
    vehicle_type: Mapped[str] = mapped_column(Text, nullable=False)
    model: Mapped[str] = mapped_column(Text, nullable=False)
    per_km_charge: Mapped[float] = mapped_column(Money, nullable=False)
    vehicle_class: Mapped[str | None] = mapped_column(Text, nullable=True)
    vehicle_number: Mapped[str | None] = mapped_column(Text, nullable=True)
    seating_capacity: Mapped[int | None] = mapped_column(Integer, nullable=True)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    owner_email: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class Destination(Base):
    """Destination table - points of interest by interest category."""

    __tablename__ = "destination"

    destination_id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    interest_category: Mapped[str] = mapped_column(Text, nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    city: Mapped[str | None] = mapped_column(Text, nullable=True)


class VehicleType(Base):
    """Vehicle type table - passenger capacity per type."""

    __tablename__ = "vehicle_type"

    name: Mapped[str] = mapped_column(Text, primary_key=True)
    min_passengers: Mapped[int] = mapped_column(Integer, nullable=False)
    max_passengers: Mapped[int] = mapped_column(Integer, nullable=False)


class VehicleClass(Base):
    """Vehicle class table."""

    __tablename__ = "vehicle_class"
    __table_args__ = (UniqueConstraint("vehicle_type", "class_name", name="uq_vehicle_class"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    vehicle_type: Mapped[str] = mapped_column(
        Text, ForeignKey("vehicle_type.name"), nullable=False
    )
    class_name: Mapped[str] = mapped_column(Text, nullable=False)
    price_multiplier: Mapped[float] = mapped_column(
        Numeric(6, 3, asdecimal=False), nullable=False, default=1.0
    )


class SavedItinerary(Base):
    """Saved itinerary table - snapshot document, no links to catalog rows."""

    __tablename__ = "saved_itinerary"
    __table_args__ = (Index("idx_saved_itinerary_user", "user_id", "created_at"),)

    itinerary_id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("profile.user_id"), nullable=False
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    days: Mapped[int] = mapped_column(Integer, nullable=False)
    guests: Mapped[int] = mapped_column(Integer, nullable=False)
    interests: Mapped[list[str]] = mapped_column(JsonDocument, nullable=False)
    itinerary_data: Mapped[dict[str, Any]] = mapped_column(JsonDocument, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class Booking(Base):
    """Booking table - vehicle rentals and hotel stays."""

    __tablename__ = "booking"
    __table_args__ = (
        Index("idx_booking_user", "user_id", "created_at"),
        Index("idx_booking_vehicle", "vehicle_id"),
        Index("idx_booking_hotel", "hotel_id"),
    )

    booking_id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("profile.user_id"), nullable=False
    )
    booking_type: Mapped[str] = mapped_column(Text, nullable=False)
    vehicle_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("vehicle.vehicle_id", ondelete="SET NULL"), nullable=True
    )
    hotel_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("hotel.hotel_id", ondelete="SET NULL"), nullable=True
    )
    rental_start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    rental_end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    estimated_km: Mapped[float | None] = mapped_column(Money, nullable=True)
    check_in_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    check_out_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    number_of_persons: Mapped[int | None] = mapped_column(Integer, nullable=True)
    number_of_nights: Mapped[int | None] = mapped_column(Integer, nullable=True)
    room_type: Mapped[str | None] = mapped_column(Text, nullable=True)
    subtotal: Mapped[float] = mapped_column(Money, nullable=False)
    service_charge: Mapped[float] = mapped_column(Money, nullable=False)
    total_amount: Mapped[float] = mapped_column(Money, nullable=False)
    payment_method: Mapped[str] = mapped_column(Text, nullable=False, default="card")
    booking_status: Mapped[str] = mapped_column(Text, nullable=False, default="confirmed")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
