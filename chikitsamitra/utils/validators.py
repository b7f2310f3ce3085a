# chikitsamitra/utils/validators.py

import re
from datetime import date, datetime, timedelta
from typing import Optional, Tuple

# Exactly ten ASCII digits; str.isdigit() would also accept other scripts.
PHONE_PATTERN = re.compile(r'^[0-9]{10}$')
OTP_PATTERN = re.compile(r'^[0-9]{6}$')
DATE_PATTERN = re.compile(r'^[0-9]{4}-[0-9]{2}-[0-9]{2}$')


def validate_phone(phone: Optional[str]) -> bool:
    """Ten ASCII digits, nothing else"""
    return bool(PHONE_PATTERN.match(phone or ""))


def validate_otp_format(code: Optional[str]) -> bool:
    return bool(OTP_PATTERN.match(code or ""))


def validate_date_format(date_str: str) -> bool:
    """Validate date string format (YYYY-MM-DD)"""
    return bool(DATE_PATTERN.match(date_str or ""))


def parse_date(date_str: str) -> Optional[date]:
    """YYYY-MM-DD to date, None when malformed or impossible (e.g. 2025-02-30)"""
    if not validate_date_format(date_str):
        return None
    try:
        return datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError:
        return None


def booking_window(today: date, days: int) -> Tuple[date, date]:
    return today, today + timedelta(days=days)


def is_within_booking_window(date_str: str, today: date, days: int) -> bool:
    appointment_date = parse_date(date_str)
    if appointment_date is None:
        return False
    start, end = booking_window(today, days)
    return start <= appointment_date <= end


def has_text(value: Optional[str]) -> bool:
    return bool((value or "").strip())
