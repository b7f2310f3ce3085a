# chikitsamitra/services/booking_store.py

import json
import logging
from typing import Any, Dict, List

import redis
from fastapi import HTTPException, status
from pydantic import ValidationError

from chikitsamitra.schemas.booking import Booking

logger = logging.getLogger("booking")


class BookingPersistenceError(HTTPException):
    def __init__(self, detail: str = "Booking storage is unavailable"):
        super().__init__(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=detail)


class BookingStore:
    """
    All bookings as one JSON-encoded list under a single Redis key.

    Appends are read-modify-write; two processes writing at the same moment
    can lose one of the writes.
    """

    def __init__(self, redis_client: redis.Redis, key: str):
        self.redis_client = redis_client
        self.key = key

    def _read_raw(self, strict: bool = False) -> List[Any]:
        try:
            data = self.redis_client.get(self.key)
        except redis.RedisError as e:
            logger.error(f"❌ Error reading {self.key}: {e}")
            # an append must not overwrite a list it could not read
            if strict:
                raise BookingPersistenceError()
            return []

        if not data:
            return []
        try:
            records = json.loads(data)
        except (TypeError, ValueError) as e:
            logger.warning(f"Stored bookings under {self.key} are not JSON, treating as empty: {e}")
            return []
        if not isinstance(records, list):
            logger.warning(f"Stored bookings under {self.key} are not a list, treating as empty")
            return []
        return records

    def load(self) -> List[Booking]:
        bookings = []
        for index, record in enumerate(self._read_raw()):
            try:
                bookings.append(Booking.model_validate(record))
            except ValidationError as e:
                logger.warning(f"Skipping corrupt booking #{index} under {self.key}: {e.error_count()} errors")
        return bookings

    def append_record(self, record: Dict[str, Any]) -> None:
        """Append any JSON object, for stores that keep whatever the client sent."""
        records = self._read_raw(strict=True)
        records.append(record)
        try:
            self.redis_client.set(self.key, json.dumps(records))
        except redis.RedisError as e:
            logger.error(f"❌ Error writing {self.key}: {e}")
            raise BookingPersistenceError()
        logger.debug(f"✓ {self.key} now holds {len(records)} bookings")

    def append(self, booking: Booking) -> None:
        self.append_record(booking.to_record())
