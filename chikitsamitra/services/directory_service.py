import logging
from typing import List, Optional

from chikitsamitra.config.settings import settings
from chikitsamitra.schemas.booking import Booking
from chikitsamitra.schemas.directory import FaqRecord, SchemeRecord
from chikitsamitra.services.directory_transport import DirectoryTransport, build_transport

logger = logging.getLogger("directory")


class DirectoryClient:
    """
    Hospital, scheme and FAQ lookups.

    Every query returns a list and never raises on transport failure; a
    source that cannot be reached looks the same as an empty one.
    """

    def __init__(self, transport: DirectoryTransport, faq_min_query_length: int = 2):
        self.transport = transport
        self.faq_min_query_length = faq_min_query_length

    @property
    def mirrors_bookings(self) -> bool:
        return self.transport.mirrors_bookings

    async def list_states(self) -> List[str]:
        return await self.transport.states()

    async def list_districts(self, state: str) -> List[str]:
        if not (state or "").strip():
            return []
        return await self.transport.districts(state.strip())

    async def list_hospitals(self, state: str, district: Optional[str] = None) -> List[str]:
        if not (state or "").strip():
            return []
        district = (district or "").strip() or None
        return await self.transport.hospitals(state.strip(), district)

    async def list_scheme_audiences(self) -> List[str]:
        return await self.transport.scheme_audiences()

    async def list_schemes(self, audience: Optional[str] = None) -> List[SchemeRecord]:
        audience = (audience or "").strip() or None
        return await self.transport.schemes(audience)

    async def search_faqs(self, query: str) -> List[FaqRecord]:
        query = (query or "").strip()
        if len(query) < max(self.faq_min_query_length, 1):
            return []
        return await self.transport.faqs(query)

    async def mirror_booking(self, booking: Booking) -> bool:
        """Best effort. False when the transport has no server to mirror to."""
        if not self.mirrors_bookings:
            return False
        return await self.transport.mirror_booking(booking)


_directory_client: Optional[DirectoryClient] = None


def get_directory_client() -> DirectoryClient:
    """Dependency injection for the directory client"""
    global _directory_client
    if _directory_client is None:
        _directory_client = DirectoryClient(
            build_transport(settings),
            faq_min_query_length=settings.faq_min_query_length,
        )
    return _directory_client
