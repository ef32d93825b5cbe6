"""Initial schema

Revision ID: 001
Revises:
Create Date: 2026-10-18

Creates:
- profile, user_role
- hotel, vehicle, destination, vehicle_type, vehicle_class
- saved_itinerary, booking
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

JSON_DOCUMENT = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")
MONEY = sa.Numeric(10, 2)


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
    )


def upgrade() -> None:
    """Create all tables."""
    # profile table
    op.create_table(
        "profile",
        sa.Column("user_id", sa.Uuid(), primary_key=True),
        sa.Column("email", sa.Text(), nullable=True),
        sa.Column("full_name", sa.Text(), nullable=True),
        sa.Column("phone", sa.Text(), nullable=True),
        _created_at(),
    )

    # user_role table
    op.create_table(
        "user_role",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("role", sa.Text(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["profile.user_id"], ondelete="CASCADE"),
        sa.UniqueConstraint("user_id", "role", name="uq_user_role"),
    )

    # hotel table
    op.create_table(
        "hotel",
        sa.Column("hotel_id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Uuid(), nullable=True),
        sa.Column("hotel_name", sa.Text(), nullable=False),
        sa.Column("stars", sa.Integer(), nullable=False),
        sa.Column("per_night_charge", MONEY, nullable=False),
        sa.Column("price_category", sa.Text(), nullable=False),
        sa.Column("city", sa.Text(), nullable=False),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("owner_email", sa.Text(), nullable=True),
        _created_at(),
        sa.ForeignKeyConstraint(["user_id"], ["profile.user_id"]),
    )
    op.create_index("idx_hotel_category_city", "hotel", ["price_category", "city"])

    # vehicle table
    op.create_table(
        "vehicle",
        sa.Column("vehicle_id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Uuid(), nullable=True),
        sa.Column("vehicle_type", sa.Text(), nullable=False),
        sa.Column("model", sa.Text(), nullable=False),
        sa.Column("per_km_charge", MONEY, nullable=False),
        sa.Column("vehicle_class", sa.Text(), nullable=True),
        sa.Column("vehicle_number", sa.Text(), nullable=True),
        sa.Column("seating_capacity", sa.Integer(), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("owner_email", sa.Text(), nullable=True),
        _created_at(),
        sa.ForeignKeyConstraint(["user_id"], ["profile.user_id"]),
    )
    op.create_index("idx_vehicle_type", "vehicle", ["vehicle_type"])

    # destination table
    op.create_table(
        "destination",
        sa.Column("destination_id", sa.Uuid(), primary_key=True),
        sa.Column("interest_category", sa.Text(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("city", sa.Text(), nullable=True),
    )

    # vehicle_type table
    op.create_table(
        "vehicle_type",
        sa.Column("name", sa.Text(), primary_key=True),
        sa.Column("min_passengers", sa.Integer(), nullable=False),
        sa.Column("max_passengers", sa.Integer(), nullable=False),
    )

    # vehicle_class table
    op.create_table(
        "vehicle_class",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("vehicle_type", sa.Text(), nullable=False),
        sa.Column("class_name", sa.Text(), nullable=False),
        sa.Column("price_multiplier", sa.Numeric(6, 3), nullable=False, server_default="1.0"),
        sa.ForeignKeyConstraint(["vehicle_type"], ["vehicle_type.name"]),
        sa.UniqueConstraint("vehicle_type", "class_name", name="uq_vehicle_class"),
    )

    # saved_itinerary table
    op.create_table(
        "saved_itinerary",
        sa.Column("itinerary_id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("days", sa.Integer(), nullable=False),
        sa.Column("guests", sa.Integer(), nullable=False),
        sa.Column("interests", JSON_DOCUMENT, nullable=False),
        sa.Column("itinerary_data", JSON_DOCUMENT, nullable=False),
        _created_at(),
        sa.ForeignKeyConstraint(["user_id"], ["profile.user_id"]),
    )
    op.create_index("idx_saved_itinerary_user", "saved_itinerary", ["user_id", "created_at"])

    # booking table
    op.create_table(
        "booking",
        sa.Column("booking_id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("booking_type", sa.Text(), nullable=False),
        sa.Column("vehicle_id", sa.Uuid(), nullable=True),
        sa.Column("hotel_id", sa.Uuid(), nullable=True),
        sa.Column("rental_start_date", sa.Date(), nullable=True),
        sa.Column("rental_end_date", sa.Date(), nullable=True),
        sa.Column("estimated_km", MONEY, nullable=True),
        sa.Column("check_in_date", sa.Date(), nullable=True),
        sa.Column("check_out_date", sa.Date(), nullable=True),
        sa.Column("number_of_persons", sa.Integer(), nullable=True),
        sa.Column("number_of_nights", sa.Integer(), nullable=True),
        sa.Column("room_type", sa.Text(), nullable=True),
        sa.Column("subtotal", MONEY, nullable=False),
        sa.Column("service_charge", MONEY, nullable=False),
        sa.Column("total_amount", MONEY, nullable=False),
        sa.Column("payment_method", sa.Text(), nullable=False, server_default="card"),
        sa.Column("booking_status", sa.Text(), nullable=False, server_default="confirmed"),
        _created_at(),
        sa.ForeignKeyConstraint(["user_id"], ["profile.user_id"]),
        sa.ForeignKeyConstraint(["vehicle_id"], ["vehicle.vehicle_id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["hotel_id"], ["hotel.hotel_id"], ondelete="SET NULL"),
    )
    op.create_index("idx_booking_user", "booking", ["user_id", "created_at"])
    op.create_index("idx_booking_vehicle", "booking", ["vehicle_id"])
    op.create_index("idx_booking_hotel", "booking", ["hotel_id"])


def downgrade() -> None:
    """Drop all tables."""
    op.drop_table("booking")
    op.drop_table("saved_itinerary")
    op.drop_table("vehicle_class")
    op.drop_table("vehicle_type")
    op.drop_table("destination")
    op.drop_table("vehicle")
    op.drop_table("hotel")
    op.drop_table("user_role")
    op.drop_table("profile")
