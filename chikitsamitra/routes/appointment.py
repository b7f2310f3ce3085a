
from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from chikitsamitra.schemas.booking import BookingForm
from chikitsamitra.services.booking_service import BookingWorkflow, get_booking_workflow
from chikitsamitra.services.document_service import document_filename, render_booking_document
from chikitsamitra.services.verification_service import (
    PhoneVerification,
    VerificationRegistry,
    get_verification_registry,
)
from chikitsamitra.utils.response import APIResponse

router = APIRouter(prefix="/appointments", tags=["Appointments"])


@router.post("")
async def create_appointment(
    form: BookingForm,
    workflow: BookingWorkflow = Depends(get_booking_workflow),
    registry: VerificationRegistry = Depends(get_verification_registry)
):
    """Book a new appointment for a verified phone number"""
    if form.session_id:
        verification = registry.get(form.session_id)
    else:
        # never verified, so submit rejects it; nothing to register
        verification = PhoneVerification()

    booking = await workflow.submit(form, verification)

    if form.session_id:
        registry.discard(form.session_id)
    return APIResponse.created(booking.to_record(), message="Appointment booked successfully!")


@router.get("")
def list_appointments(workflow: BookingWorkflow = Depends(get_booking_workflow)):
    """All stored bookings, each tagged Upcoming or Past"""
    views = workflow.list_bookings()
    if not views:
        return APIResponse.success([], message="You haven't booked any appointments yet.")
    data = [view.model_dump(mode="json", by_alias=True) for view in views]
    return APIResponse.success(data, message=f"{len(data)} appointments found")


@router.get("/{booking_id}/document", response_class=HTMLResponse)
def download_appointment(
    booking_id: str,
    download: bool = Query(True, description="Send as an attachment instead of inline"),
    workflow: BookingWorkflow = Depends(get_booking_workflow)
):
    """Printable appointment slip, looked up by booking id"""
    booking = workflow.find(booking_id)
    disposition = "attachment" if download else "inline"
    return HTMLResponse(
        content=render_booking_document(booking),
        headers={"Content-Disposition": f'{disposition}; filename="{document_filename(booking)}"'}
    )
