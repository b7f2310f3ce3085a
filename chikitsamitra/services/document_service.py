import html
import re
from typing import List, Tuple

from chikitsamitra.schemas.booking import Booking

MISSING = "N/A"


def build_document_fields(booking: Booking) -> List[Tuple[str, str]]:
    """Label / value pairs shown on the appointment slip"""
    fields = [
        ("Reference ID", booking.reference),
        ("Patient Name", booking.name),
        ("Phone", booking.phone),
        ("Date of Birth", booking.dob),
        ("Hospital", booking.hospital),
        ("Department", booking.department),
        ("Appointment Date", booking.date),
        ("Time Slot", booking.timeslot),
    ]
    return [(label, (value or "").strip() or MISSING) for label, value in fields]


def document_filename(booking: Booking, extension: str = "html") -> str:
    stem = booking.reference or booking.name or "booking"
    stem = re.sub(r'[^A-Za-z0-9_-]+', "_", stem).strip("_") or "booking"
    return f"Appointment_{stem}.{extension}"


def render_booking_document(booking: Booking) -> str:
    """Standalone printable HTML slip for one booking."""
    title = html.escape(booking.reference or booking.name or "Appointment")
    rows = "\n".join(
        f"""        <tr><th>{html.escape(label)}</th><td>{html.escape(value)}</td></tr>"""
        for label, value in build_document_fields(booking)
    )

    return f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>Print - {title}</title>
  <style>
    body {{ font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif; margin: 0; padding: 32px; color: #1f2937; }}
    .slip {{ max-width: 640px; margin: 0 auto; border: 1px solid #e5e7eb; border-radius: 12px; padding: 32px; }}
    h1 {{ margin: 0 0 4px; font-size: 22px; color: #2563eb; }}
    p.subtitle {{ margin: 0 0 24px; color: #6b7280; }}
    table {{ width: 100%; border-collapse: collapse; }}
    th, td {{ text-align: left; padding: 10px 8px; border-bottom: 1px solid #e5e7eb; }}
    th {{ width: 40%; color: #374151; font-weight: 600; }}
    p.note {{ margin-top: 24px; font-size: 13px; color: #6b7280; }}
    @media print {{ body {{ padding: 0; }} .slip {{ border: none; }} }}
  </style>
</head>
<body onload="window.focus(); window.print();">
  <div class="slip">
    <h1>ChikitsaMitra</h1>
    <p class="subtitle">Appointment Confirmation</p>
    <table>
{rows}
    </table>
    <p class="note">Please carry this slip and a valid photo ID to the hospital on the day of your appointment.</p>
  </div>
</body>
</html>
"""
