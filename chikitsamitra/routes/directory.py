# chikitsamitra/routes/directory.py
#
# The proxy surface the browser page uses when it is not talking to the
# spreadsheet directly. Responses are bare JSON lists.

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from chikitsamitra.services.booking_service import get_mirrored_booking_store
from chikitsamitra.services.booking_store import BookingStore
from chikitsamitra.services.directory_service import DirectoryClient, get_directory_client

logger = logging.getLogger("directory")

router = APIRouter(tags=["Directory"])


@router.get("/states", response_model=List[str])
async def get_states(directory: DirectoryClient = Depends(get_directory_client)):
    """States that have at least one listed hospital"""
    return await directory.list_states()


@router.get("/districts", response_model=List[str])
async def get_districts(
    state: str = Query(""),
    directory: DirectoryClient = Depends(get_directory_client)
):
    return await directory.list_districts(state)


@router.get("/hospitals", response_model=List[str])
async def get_hospitals(
    state: str = Query(""),
    district: Optional[str] = Query(None),
    directory: DirectoryClient = Depends(get_directory_client)
):
    """Hospital names in a state, narrowed to one district when given"""
    return await directory.list_hospitals(state, district)


@router.get("/scheme-states", response_model=List[str])
async def get_scheme_states(directory: DirectoryClient = Depends(get_directory_client)):
    return await directory.list_scheme_audiences()


@router.get("/schemes")
async def get_schemes(
    state: str = Query(""),
    directory: DirectoryClient = Depends(get_directory_client)
) -> List[Dict[str, str]]:
    schemes = await directory.list_schemes(state)
    return [scheme.to_row() for scheme in schemes]


@router.get("/faqs")
async def get_faqs(
    query: str = Query(""),
    directory: DirectoryClient = Depends(get_directory_client)
) -> List[Dict[str, str]]:
    faqs = await directory.search_faqs(query)
    return [faq.model_dump() for faq in faqs]


@router.post("/book_appointment", status_code=status.HTTP_201_CREATED)
def book_appointment(
    booking: Dict[str, Any] = Body(...),
    store: BookingStore = Depends(get_mirrored_booking_store)
):
    """Keep a server-side copy of a booking made in the browser"""
    store.append_record(booking)
    reference = booking.get("reference")
    logger.info(f"Booking also received by server: {reference}")
    return {"success": True, "reference": reference}
