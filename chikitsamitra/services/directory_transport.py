# chikitsamitra/services/directory_transport.py
#
# Two ways of reaching the hospital / scheme / FAQ directory:
#   * AppsScriptTransport talks to the spreadsheet web-app directly and does
#     all filtering and aggregation over the returned rows.
#   * ProxyTransport talks to a deployment of this service's /api surface,
#     which has already done that work.
# Neither raises on network or payload problems: failures are logged and
# come back as empty results.

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import httpx

from chikitsamitra.config.settings import Settings
from chikitsamitra.schemas.booking import Booking
from chikitsamitra.schemas.directory import FaqRecord, SchemeRecord
from chikitsamitra.utils.normalizers import (
    HOSPITAL_FIELD_ALIASES,
    is_all_india,
    normalize_faq,
    normalize_hospital,
    normalize_scheme,
    order_audiences,
    pick_field,
    rows_only,
    same_text,
    unique_sorted,
)

logger = logging.getLogger("directory")

NO_STORE_HEADERS = {"Cache-Control": "no-store"}

HOSPITALS_SHEET = "Hospitals"
SCHEMES_SHEET = "Schemes"
FAQ_SHEET = "Medical_FAQ"


class DirectoryTransport(ABC):
    """Strategy interface for directory queries."""

    mirrors_bookings: bool = False

    def __init__(self, timeout: float = 10.0, client: Optional[httpx.AsyncClient] = None):
        self.timeout = timeout
        self._client = client

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        if self._client is not None:
            return await self._client.request(method, url, **kwargs)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.request(method, url, **kwargs)

    async def _fetch_list(self, url: str, params: Optional[Dict[str, str]] = None) -> Optional[List[Any]]:
        """GET a JSON list. None on any failure."""
        try:
            response = await self._request("GET", url, params=params, headers=NO_STORE_HEADERS)
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Fetch failed: {url} {params or ''} -> {e}")
            return None
        except ValueError as e:
            logger.error(f"Undecodable JSON from {url}: {e}")
            return None

        if not isinstance(data, list):
            logger.error(f"Expected a JSON list from {url}, got {type(data).__name__}")
            return None
        return data

    @abstractmethod
    async def states(self) -> List[str]:
        ...

    @abstractmethod
    async def districts(self, state: str) -> List[str]:
        ...

    @abstractmethod
    async def hospitals(self, state: str, district: Optional[str] = None) -> List[str]:
        ...

    @abstractmethod
    async def scheme_audiences(self) -> List[str]:
        ...

    @abstractmethod
    async def schemes(self, audience: Optional[str] = None) -> List[SchemeRecord]:
        ...

    @abstractmethod
    async def faqs(self, query: str) -> List[FaqRecord]:
        ...

    async def mirror_booking(self, booking: Booking) -> bool:
        return False


class AppsScriptTransport(DirectoryTransport):

    def __init__(
        self,
        exec_url: str,
        api_key: Optional[str] = None,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        super().__init__(timeout=timeout, client=client)
        self.exec_url = exec_url
        self.api_key = api_key

    def _params(self, sheet: str, **extra: Optional[str]) -> Dict[str, str]:
        params = {"sheet": sheet}
        params.update({k: v for k, v in extra.items() if v is not None})
        if self.api_key:
            params["key"] = self.api_key
        return params

    async def _rows(self, sheet: str, **extra: Optional[str]) -> List[Dict[str, Any]]:
        if not self.exec_url:
            logger.warning("APPS_SCRIPT_EXEC_URL is not set; directory queries return nothing")
            return []
        return rows_only(await self._fetch_list(self.exec_url, self._params(sheet, **extra)))

    async def _hospital_rows(self, state: str) -> List[Dict[str, Any]]:
        # state goes along as a server-side hint; rows are re-checked here
        rows = await self._rows(HOSPITALS_SHEET, state=state)
        kept = []
        for row in rows:
            row_state = pick_field(row, HOSPITAL_FIELD_ALIASES["state"])
            if not row_state or same_text(row_state, state):
                kept.append(row)
        return kept

    async def states(self) -> List[str]:
        rows = await self._rows(HOSPITALS_SHEET)
        return unique_sorted(pick_field(row, HOSPITAL_FIELD_ALIASES["state"]) for row in rows)

    async def districts(self, state: str) -> List[str]:
        rows = await self._hospital_rows(state)
        return unique_sorted(pick_field(row, HOSPITAL_FIELD_ALIASES["district"]) for row in rows)

    async def hospitals(self, state: str, district: Optional[str] = None) -> List[str]:
        records = [normalize_hospital(row) for row in await self._hospital_rows(state)]
        if district:
            records = [record for record in records if same_text(record.district, district)]
        return unique_sorted(record.name for record in records)

    async def scheme_audiences(self) -> List[str]:
        rows = await self._rows(SCHEMES_SHEET)
        return order_audiences(normalize_scheme(row).target_audience for row in rows)

    async def schemes(self, audience: Optional[str] = None) -> List[SchemeRecord]:
        records = [normalize_scheme(row) for row in await self._rows(SCHEMES_SHEET)]
        if not audience or is_all_india(audience):
            return records
        return [
            record for record in records
            if is_all_india(record.target_audience) or same_text(record.target_audience, audience)
        ]

    async def faqs(self, query: str) -> List[FaqRecord]:
        # the sheet does the matching
        return [normalize_faq(row) for row in await self._rows(FAQ_SHEET, query=query)]


class ProxyTransport(DirectoryTransport):

    mirrors_bookings = True

    def __init__(self, base_url: str, timeout: float = 10.0, client: Optional[httpx.AsyncClient] = None):
        super().__init__(timeout=timeout, client=client)
        self.base_url = base_url.rstrip("/")

    def _url(self, path: str) -> str:
        return f"{self.base_url}/api/{path}"

    async def _names(self, path: str, params: Optional[Dict[str, str]] = None) -> List[str]:
        data = await self._fetch_list(self._url(path), params)
        return unique_sorted(item for item in (data or []) if isinstance(item, (str, int, float)))

    async def states(self) -> List[str]:
        return await self._names("states")

    async def districts(self, state: str) -> List[str]:
        return await self._names("districts", {"state": state})

    async def hospitals(self, state: str, district: Optional[str] = None) -> List[str]:
        params = {"state": state}
        if district:
            params["district"] = district
        return await self._names("hospitals", params)

    async def scheme_audiences(self) -> List[str]:
        return order_audiences(await self._names("scheme-states"))

    async def schemes(self, audience: Optional[str] = None) -> List[SchemeRecord]:
        data = await self._fetch_list(self._url("schemes"), {"state": audience or ""})
        return [normalize_scheme(row) for row in rows_only(data)]

    async def faqs(self, query: str) -> List[FaqRecord]:
        data = await self._fetch_list(self._url("faqs"), {"query": query})
        return [normalize_faq(row) for row in rows_only(data)]

    async def mirror_booking(self, booking: Booking) -> bool:
        url = self._url("book_appointment")
        try:
            response = await self._request("POST", url, json=booking.to_record())
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"POST booking failed: {e}")
            return False

        if not response.is_success:
            logger.warning(f"Server booking failed: HTTP {response.status_code}")
            return False
        logger.info(f"Booking {booking.reference} also sent to server")
        return True


def build_transport(settings: Settings, client: Optional[httpx.AsyncClient] = None) -> DirectoryTransport:
    """Pick the transport once, from configuration."""
    if settings.directory_transport == "proxy":
        logger.info(f"Directory transport: proxy at {settings.proxy_base_url}")
        return ProxyTransport(settings.proxy_base_url, timeout=settings.http_timeout_seconds, client=client)

    logger.info("Directory transport: Apps Script")
    return AppsScriptTransport(
        settings.apps_script_exec_url,
        api_key=settings.apps_script_api_key,
        timeout=settings.http_timeout_seconds,
        client=client,
    )
