import asyncio
import logging
import uuid
from datetime import date, datetime, timezone
from typing import Callable, List, Optional, Set

from fastapi import HTTPException, status

from chikitsamitra.config.redis_config import get_redis_client
from chikitsamitra.config.settings import settings
from chikitsamitra.models.booking import AppointmentTimeline
from chikitsamitra.schemas.booking import Booking, BookingForm, BookingView
from chikitsamitra.services.booking_store import BookingStore
from chikitsamitra.services.directory_service import DirectoryClient, get_directory_client
from chikitsamitra.services.verification_service import PhoneVerification
from chikitsamitra.utils.validators import (
    booking_window,
    has_text,
    is_within_booking_window,
    parse_date,
    validate_phone,
)

logger = logging.getLogger("booking")


class BookingValidationError(HTTPException):
    def __init__(self, field: str, message: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=message)
        self.field = field


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def make_reference(moment: datetime) -> str:
    """CM- plus the last six digits of the millisecond timestamp"""
    millis = str(round(moment.timestamp() * 1000))
    return f"CM-{millis[-6:]}"


def make_booking_id() -> str:
    return f"bk_{uuid.uuid4().hex[:16]}"


def timeline_for(booking: Booking, today: date) -> AppointmentTimeline:
    appointment_date = parse_date(booking.date)
    if appointment_date is not None and appointment_date >= today:
        return AppointmentTimeline.UPCOMING
    return AppointmentTimeline.PAST


class BookingWorkflow:
    """
    Validates and stores appointment requests.

    A successful submission is written to the local booking list and, when
    the directory transport has a server behind it, also posted there in the
    background. The background post never affects the submission result.
    """

    def __init__(
        self,
        store: BookingStore,
        directory: DirectoryClient,
        window_days: int = 30,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.store = store
        self.directory = directory
        self.window_days = window_days
        self.clock = clock
        self._pending_mirrors: Set[asyncio.Task] = set()

    def today(self) -> date:
        return self.clock().date()

    def validate(self, form: BookingForm, verification: PhoneVerification) -> None:
        """Raise BookingValidationError for the first failing check."""
        if not has_text(form.name):
            raise BookingValidationError("name", "Please enter your full name")

        phone = form.phone.strip()
        if not validate_phone(phone):
            raise BookingValidationError("phone", "Enter valid 10-digit phone")

        if not verification.is_verified_for(phone):
            raise BookingValidationError("phone", "Please verify your phone number first")

        if not (has_text(form.state) and has_text(form.district) and has_text(form.hospital)):
            raise BookingValidationError("hospital", "Pick state, district and hospital")

        if not (has_text(form.timeslot) and has_text(form.date)):
            raise BookingValidationError("date", "Choose slot & date")

        today = self.today()
        if not is_within_booking_window(form.date.strip(), today, self.window_days):
            start, end = booking_window(today, self.window_days)
            raise BookingValidationError(
                "date",
                f"Appointment date must be between {start.isoformat()} and {end.isoformat()}"
            )

        if has_text(form.dob):
            dob = parse_date(form.dob.strip())
            if dob is None:
                raise BookingValidationError("dob", "Date of birth must be in YYYY-MM-DD format")
            if dob > today:
                raise BookingValidationError("dob", "Date of birth cannot be in the future")

    def build_booking(self, form: BookingForm) -> Booking:
        now = self.clock()
        return Booking(
            id=make_booking_id(),
            reference=make_reference(now),
            name=form.name.strip(),
            phone=form.phone.strip(),
            dob=form.dob.strip(),
            gender=form.gender.strip(),
            appointment_type=form.appointment_type.strip(),
            state=form.state.strip(),
            district=form.district.strip(),
            hospital=form.hospital.strip(),
            department=form.department.strip(),
            date=form.date.strip(),
            timeslot=form.timeslot.strip(),
            created_at=now,
        )

    async def submit(self, form: BookingForm, verification: PhoneVerification) -> Booking:
        """Validate, store and (in proxy mode) mirror one booking; resets the verification."""
        self.validate(form, verification)

        booking = self.build_booking(form)
        self.store.append(booking)
        logger.info(f"Appointment booked: {booking.reference} at {booking.hospital} on {booking.date}")

        verification.reset()

        if self.directory.mirrors_bookings:
            self._schedule_mirror(booking)
        return booking

    def _schedule_mirror(self, booking: Booking) -> None:
        task = asyncio.create_task(self._mirror(booking))
        self._pending_mirrors.add(task)
        task.add_done_callback(self._pending_mirrors.discard)

    async def _mirror(self, booking: Booking) -> None:
        try:
            await self.directory.mirror_booking(booking)
        except Exception as e:
            logger.warning(f"Mirroring booking {booking.reference} failed: {e}")

    async def drain_mirrors(self) -> None:
        """Wait for in-flight mirror posts (shutdown and tests)."""
        if self._pending_mirrors:
            await asyncio.gather(*list(self._pending_mirrors), return_exceptions=True)

    def list_bookings(self) -> List[BookingView]:
        today = self.today()
        return [
            BookingView(booking=booking, timeline=timeline_for(booking, today))
            for booking in self.store.load()
        ]

    def find(self, booking_id: str) -> Booking:
        # references repeat every million milliseconds, ids do not
        for booking in self.store.load():
            if booking.id == booking_id:
                return booking
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Booking {booking_id} not found"
        )


_booking_workflow: Optional[BookingWorkflow] = None


def get_booking_workflow() -> BookingWorkflow:
    """Dependency injection for the booking workflow"""
    global _booking_workflow
    if _booking_workflow is None:
        _booking_workflow = BookingWorkflow(
            BookingStore(get_redis_client(), settings.bookings_key),
            get_directory_client(),
            window_days=settings.booking_window_days,
        )
    return _booking_workflow


def get_mirrored_booking_store() -> BookingStore:
    """Store for bookings posted to /api/book_appointment by other front ends"""
    return BookingStore(get_redis_client(), settings.mirrored_bookings_key)
