from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional
from chikitsamitra.models.booking import AppointmentTimeline
from chikitsamitra.models.verification import VerificationStatus


class BookingForm(BaseModel):
    """Raw appointment form fields. Everything is optional here so the
    workflow can report the first missing field in its own order."""
    session_id: Optional[str] = None
    name: str = ""
    phone: str = ""
    dob: str = Field("", description="Format: YYYY-MM-DD")
    gender: str = ""
    appointment_type: str = Field("", alias="appointmentType")
    state: str = ""
    district: str = ""
    hospital: str = ""
    department: str = ""
    date: str = Field("", description="Format: YYYY-MM-DD")
    timeslot: str = Field("", alias="slot")

    model_config = ConfigDict(populate_by_name=True)


class Booking(BaseModel):
    id: str
    reference: str
    name: str
    phone: str
    dob: str = ""
    gender: str = ""
    appointment_type: str = Field("", alias="appointmentType")
    state: str
    district: str
    hospital: str
    department: str = ""
    date: str = Field(..., description="Format: YYYY-MM-DD")
    timeslot: str
    created_at: datetime = Field(..., alias="createdAt")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_record(self) -> dict:
        """JSON-safe dict with the persisted (camelCase) field names"""
        return self.model_dump(mode="json", by_alias=True)


class BookingView(BaseModel):
    booking: Booking
    timeline: AppointmentTimeline


class SendCodeRequest(BaseModel):
    session_id: Optional[str] = None
    phone: str = ""


class VerifyCodeRequest(BaseModel):
    session_id: str
    code: str = ""


class PhoneChangeRequest(BaseModel):
    session_id: str
    phone: str = ""


class VerificationResponse(BaseModel):
    session_id: str
    status: VerificationStatus
    phone_verified: bool
    phone_editable: bool
    submit_enabled: bool
    # Delivery is simulated: the code is handed straight back to the user.
    simulated_code: Optional[str] = None
    message: Optional[str] = None
