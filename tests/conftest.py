from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import httpx
import pytest
import redis

from chikitsamitra.schemas.booking import Booking, BookingForm
from chikitsamitra.services.booking_service import BookingWorkflow
from chikitsamitra.services.booking_store import BookingStore
from chikitsamitra.services.directory_service import DirectoryClient
from chikitsamitra.services.directory_transport import AppsScriptTransport
from chikitsamitra.services.verification_service import PhoneVerification

EXEC_URL = "https://script.example.test/macros/s/abc/exec"
FIXED_NOW = datetime(2025, 3, 10, 9, 30, 0, 123000, tzinfo=timezone.utc)

HOSPITAL_ROWS: List[Dict[str, Any]] = [
    {"Name": "AIIMS Patna", "State": "Bihar", "District": "Patna"},
    {"Hospital Name": "PMCH", "state": "Bihar", "district": "Patna"},
    {"name": "Sadar Hospital Gaya", "State": "Bihar", "District": "Gaya"},
    {"Name (Hospital Name)": "KEM Hospital", "State": "Maharashtra", "District": "Mumbai"},
    {"Name": "  Sassoon General  ", "State": " Maharashtra ", "District": "Pune"},
    {"Name": "AIIMS Patna", "State": "Bihar", "District": " Patna"},
    {"Name": "", "State": "", "District": ""},
]

SCHEME_ROWS: List[Dict[str, Any]] = [
    {"Target Audience": "Bihar", "Scheme Name": "Mukhyamantri Chikitsa Sahayata", "Description": "State aid"},
    {"Target Audience": "All India", "Scheme Name": "Ayushman Bharat", "Description": "PM-JAY cover"},
    {"state": "Maharashtra", "scheme_name": "MJPJAY", "desc": "Jeevandayee"},
    {"Scheme": "Janani Suraksha Yojana"},
    {"Target Audience": "Kerala", "title": "Karunya"},
]

FAQ_ROWS: List[Dict[str, Any]] = [
    {"question": "What is PM-JAY?", "answer": "A health cover scheme."},
    {"Q": "ignored", "a": "Answer without question"},
]


class FakeRedis:
    """In-memory stand-in for the handful of redis.Redis calls the app makes."""

    def __init__(self):
        self.data: Dict[str, str] = {}
        self.fail_reads = False
        self.fail_writes = False

    def get(self, key: str) -> Optional[str]:
        if self.fail_reads:
            raise redis.ConnectionError("redis is down")
        return self.data.get(key)

    def set(self, key: str, value: str) -> bool:
        if self.fail_writes:
            raise redis.ConnectionError("redis is down")
        self.data[key] = value
        return True

    def delete(self, *keys: str) -> int:
        return sum(1 for key in keys if self.data.pop(key, None) is not None)

    def ping(self) -> bool:
        return True


def sheet_handler(hospitals=None, schemes=None, faqs=None, calls: Optional[list] = None):
    """httpx.MockTransport handler that serves the three directory sheets"""
    sheets = {
        "Hospitals": HOSPITAL_ROWS if hospitals is None else hospitals,
        "Schemes": SCHEME_ROWS if schemes is None else schemes,
        "Medical_FAQ": FAQ_ROWS if faqs is None else faqs,
    }

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        sheet = request.url.params.get("sheet")
        if sheet not in sheets:
            return httpx.Response(404, json={"error": "unknown sheet"})
        return httpx.Response(200, json=sheets[sheet])

    return handler


def apps_script_directory(handler, api_key: Optional[str] = None) -> DirectoryClient:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return DirectoryClient(AppsScriptTransport(EXEC_URL, api_key=api_key, client=client))


def verified_for(phone: str) -> PhoneVerification:
    verification = PhoneVerification()
    code = verification.send_code(phone)
    assert verification.verify(code)
    return verification


def valid_form(**overrides) -> BookingForm:
    fields = {
        "name": "Asha Devi",
        "phone": "9876543210",
        "dob": "1990-05-04",
        "gender": "Female",
        "appointmentType": "In-person",
        "state": "Bihar",
        "district": "Patna",
        "hospital": "AIIMS Patna",
        "department": "Cardiology",
        "date": "2025-03-15",
        "slot": "10:00 - 11:00",
    }
    fields.update(overrides)
    return BookingForm(**fields)


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
def booking_store(fake_redis):
    return BookingStore(fake_redis, "cm_bookings_v1")


@pytest.fixture
def directory():
    return apps_script_directory(sheet_handler())


@pytest.fixture
def workflow(booking_store, directory):
    return BookingWorkflow(booking_store, directory, window_days=30, clock=lambda: FIXED_NOW)


def sample_booking(**overrides) -> Booking:
    fields = {
        "id": "bk_1",
        "reference": "CM-000001",
        "name": "Asha Devi",
        "phone": "9876543210",
        "state": "Bihar",
        "district": "Patna",
        "hospital": "PMCH",
        "department": "Cardiology",
        "date": "2025-03-15",
        "timeslot": "10:00 - 11:00",
        "created_at": FIXED_NOW,
    }
    fields.update(overrides)
    return Booking(**fields)
