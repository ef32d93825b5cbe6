"""Export service - PDF rendering of generated itineraries."""

import io
import logging
from datetime import date
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from backend.app.models.itinerary import ItineraryResult
from backend.app.models.trip import TripRequest

logger = logging.getLogger(__name__)

CURRENCY = "LKR"


def _money(amount: float) -> str:
    return f"{CURRENCY} {amount:,.2f}"


def render_itinerary_pdf(
    request: TripRequest, result: ItineraryResult, title: str | None = None
) -> bytes:
    """Render an itinerary as a PDF document.

    Layout: title, summary block, per-day table, total.

    Args:
        request: Trip parameters the itinerary was generated from
        result: Generated itinerary
        title: Optional title (falls back to request.title)

    Returns:
        PDF bytes
    """
    heading = title or request.title or f"{request.days}-Day Sri Lanka Itinerary"

    buf = io.BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=A4, topMargin=0.5 * inch, title=heading)
    styles = getSampleStyleSheet()
    elements = []

    # Title
    elements.append(Paragraph(escape(heading), styles["Title"]))
    elements.append(Spacer(1, 12))

    # Summary
    hotel = result.hotel
    vehicle = result.vehicle
    summary = [
        f"<b>Duration:</b> {request.days} day(s)",
        f"<b>Guests:</b> {request.guests}",
        f"<b>Interests:</b> {escape(', '.join(request.interests))}",
        f"<b>Budget:</b> {_money(request.budget)}",
        f"<b>Hotel:</b> {escape(hotel.hotel_name)} ({hotel.stars}-star, {escape(hotel.city)}) "
        f"- {_money(hotel.per_night_charge)}/night",
        f"<b>Vehicle:</b> {escape(vehicle.vehicle_type)} - {escape(vehicle.model)} "
        f"- {_money(vehicle.per_km_charge)}/km",
        f"<b>Generated:</b> {date.today().isoformat()}",
    ]
    for line in summary:
        elements.append(Paragraph(line, styles["Normal"]))
    elements.append(Spacer(1, 12))

    # Day-by-day table
    elements.append(Paragraph("<b>Day-by-Day Plan</b>", styles["Heading2"]))
    body_style = styles["BodyText"]
    day_rows: list[list[object]] = [["Day", "Activity", "Hotel", "Transport", "Total"]]
    for day in result.days:
        day_rows.append([
            str(day.day),
            Paragraph(f"<b>{escape(day.interest)}</b><br/>{escape(day.activity)}", body_style),
            _money(day.accommodation_cost),
            _money(day.transport_cost),
            _money(day.daily_total),
        ])
    table = Table(
        day_rows,
        colWidths=[0.5 * inch, 3.2 * inch, 1.1 * inch, 1.1 * inch, 1.1 * inch],
        repeatRows=1,
    )
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#186AAB")),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
        ("FONTSIZE", (0, 0), (-1, -1), 9),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
        ("VALIGN", (0, 0), (-1, -1), "TOP"),
        ("ALIGN", (2, 1), (-1, -1), "RIGHT"),
    ]))
    elements.append(table)
    elements.append(Spacer(1, 12))

    # Total
    elements.append(
        Paragraph(f"<b>Estimated Total:</b> {_money(result.total_cost)}", styles["Heading2"])
    )

    if result.violations:
        elements.append(Paragraph("<b>Notes</b>", styles["Heading3"]))
        for violation in result.violations:
            elements.append(Paragraph(escape(violation.message), styles["Normal"]))

    doc.build(elements)
    logger.info(f"[export] rendered itinerary PDF ({len(result.days)} days)")
    return buf.getvalue()
