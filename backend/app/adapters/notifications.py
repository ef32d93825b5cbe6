"""Booking notification adapter - sends email through the Resend HTTP API.

Delivery is best effort: failures are logged and reported as ``False``,
never retried and never raised.
"""

import html
import logging
from typing import Any

import httpx
from pydantic import BaseModel

from backend.app.models.common import BookingType
from backend.app.utils.metrics import metrics

logger = logging.getLogger(__name__)

_VEHICLE_FIELDS = [
    ("Vehicle", "vehicle_model"),
    ("Vehicle Type", "vehicle_type"),
    ("Rental Start", "rental_start_date"),
    ("Rental End", "rental_end_date"),
    ("Estimated KM", "estimated_km"),
]

_ACCOMMODATION_FIELDS = [
    ("Hotel", "hotel_name"),
    ("City", "city"),
    ("Check-in", "check_in_date"),
    ("Check-out", "check_out_date"),
    ("Number of Nights", "number_of_nights"),
    ("Number of Persons", "number_of_persons"),
    ("Room Type", "room_type"),
]


class BookingNotification(BaseModel):
    """Payload describing a confirmed booking."""

    booking_type: BookingType
    details: dict[str, Any]
    customer_email: str
    customer_name: str = "Guest"
    total_amount: float
    owner_email: str | None = None


class EmailMessage(BaseModel):
    """Rendered email ready for delivery."""

    sender: str
    to: list[str]
    subject: str
    html: str


def _esc(value: Any) -> str:
    return html.escape("" if value is None else str(value), quote=True)


def build_booking_email(
    notification: BookingNotification, admin_email: str, sender: str
) -> EmailMessage:
    """Render the admin/owner email for a booking.

    All interpolated values are HTML-escaped.

    Raises:
        ValueError: If no admin email is configured
    """
    if not admin_email:
        raise ValueError("Admin email not configured")

    recipients = [admin_email]
    if notification.owner_email and notification.owner_email not in recipients:
        recipients.append(notification.owner_email)

    is_vehicle = notification.booking_type == BookingType.vehicle
    heading = "Vehicle Booking Details" if is_vehicle else "Accommodation Booking Details"
    fields = _VEHICLE_FIELDS if is_vehicle else _ACCOMMODATION_FIELDS

    details = notification.details
    detail_lines = "".join(
        f"<p><strong>{label}:</strong> {_esc(details.get(key))}</p>" for label, key in fields
    )

    body = (
        "<div style=\"font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;\">"
        "<h2>New Booking Notification</h2>"
        "<h3>Customer Information</h3>"
        f"<p><strong>Name:</strong> {_esc(notification.customer_name)}</p>"
        f"<p><strong>Email:</strong> {_esc(notification.customer_email)}</p>"
        f"<h3>{heading}</h3>{detail_lines}"
        "<h3>Payment Information</h3>"
        f"<p><strong>Subtotal:</strong> LKR {_esc(details.get('subtotal'))}</p>"
        f"<p><strong>Service Charge (10%):</strong> LKR {_esc(details.get('service_charge'))}</p>"
        f"<p><strong>Total Amount:</strong> LKR {notification.total_amount:.2f}</p>"
        "<p><strong>Payment Method:</strong> Card (Demo)</p>"
        "<p style=\"color: #6b7280; font-size: 12px;\">"
        "This is an automated notification from your Sri Lanka Travel booking system.</p>"
        "</div>"
    )

    return EmailMessage(
        sender=sender,
        to=recipients,
        subject=f"New {'Vehicle' if is_vehicle else 'Accommodation'} Booking",
        html=body,
    )


async def send_booking_notification(
    notification: BookingNotification,
    *,
    api_key: str,
    admin_email: str,
    sender: str,
    base_url: str = "https://api.resend.com/emails",
    client: httpx.AsyncClient | None = None,
    timeout: float = 10.0,
) -> bool:
    """Send the booking email.

    Args:
        notification: Booking payload
        api_key: Resend API key
        admin_email: Always-copied admin recipient
        sender: From header
        base_url: Resend emails endpoint
        client: Optional httpx client (for testing with mocks)
        timeout: Request timeout in seconds when no client is given

    Returns:
        True when the provider accepted the message
    """
    if not api_key:
        logger.warning("[notify] RESEND_API_KEY not configured, skipping booking email")
        return False

    try:
        message = build_booking_email(notification, admin_email=admin_email, sender=sender)
    except ValueError as e:
        logger.warning(f"[notify] cannot build booking email: {e}")
        metrics.inc_notification_failure(notification.booking_type.value)
        return False

    close_client = False
    if client is None:
        client = httpx.AsyncClient(timeout=timeout)
        close_client = True

    try:
        response = await client.post(
            base_url,
            json={
                "from": message.sender,
                "to": message.to,
                "subject": message.subject,
                "html": message.html,
            },
            headers={"Authorization": f"Bearer {api_key}"},
        )
        response.raise_for_status()
    except httpx.HTTPError as e:
        logger.error(f"[notify] booking email failed: {type(e).__name__}: {e}")
        metrics.inc_notification_failure(notification.booking_type.value)
        return False
    finally:
        if close_client:
            await client.aclose()

    logger.info(f"[notify] booking email sent to {len(message.to)} recipient(s)")
    return True
