# chikitsamitra/services/verification_service.py

import logging
import random
import uuid
from collections import OrderedDict
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Optional, Tuple

from fastapi import HTTPException, status

from chikitsamitra.config.settings import settings
from chikitsamitra.models.verification import VerificationStatus
from chikitsamitra.utils.validators import validate_otp_format, validate_phone

logger = logging.getLogger("verification")

INVALID_PHONE_MESSAGE = "Please enter a valid 10-digit phone number."
INVALID_CODE_MESSAGE = "Verification failed. Invalid OTP."


class PhoneVerificationError(HTTPException):
    def __init__(self, message: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


def generate_code() -> str:
    """Generate 6-digit one-time code"""
    return str(random.randint(100000, 999999))


class PhoneVerification:
    """
    Simulated one-time-code check for a single form.

    Unverified -> CodeSent on send_code, CodeSent -> Verified on a matching
    code, back to Unverified on a wrong code or when the number changes.
    Nothing is actually delivered: send_code hands the code back.
    """

    def __init__(self):
        self.status = VerificationStatus.UNVERIFIED
        self.phone: Optional[str] = None
        self.pending_code: Optional[str] = None

    @property
    def is_verified(self) -> bool:
        return self.status == VerificationStatus.VERIFIED

    @property
    def phone_editable(self) -> bool:
        return not self.is_verified

    @property
    def submit_enabled(self) -> bool:
        return self.is_verified

    def is_verified_for(self, phone: str) -> bool:
        return self.is_verified and self.phone == phone

    def send_code(self, phone: str) -> str:
        phone = (phone or "").strip()
        if not validate_phone(phone):
            raise PhoneVerificationError(INVALID_PHONE_MESSAGE)

        self.phone = phone
        self.pending_code = generate_code()
        self.status = VerificationStatus.CODE_SENT
        logger.info(f"Simulated OTP sent to {phone}")
        return self.pending_code

    def verify(self, code: str) -> bool:
        if self.is_verified:
            return True

        # a wrong entry keeps the pending code so it can be retyped
        code = (code or "").strip()
        if self.pending_code is not None and validate_otp_format(code) and code == self.pending_code:
            self.status = VerificationStatus.VERIFIED
            self.pending_code = None
            logger.info(f"Phone {self.phone} verified")
            return True

        self.status = VerificationStatus.UNVERIFIED
        logger.debug(f"Invalid code entered for {self.phone}")
        return False

    def phone_changed(self, new_phone: str) -> None:
        new_phone = (new_phone or "").strip()
        if new_phone == self.phone:
            return
        if self.status != VerificationStatus.UNVERIFIED:
            logger.debug(f"Phone changed from {self.phone}, verification reset")
        self.reset()
        self.phone = new_phone or None

    def reset(self) -> None:
        self.status = VerificationStatus.UNVERIFIED
        self.phone = None
        self.pending_code = None


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class VerificationRegistry:
    """
    One PhoneVerification per client session, in memory.

    Sessions idle for longer than ttl_minutes are dropped, and the least
    recently used ones are evicted once more than max_sessions are held.
    """

    def __init__(
        self,
        ttl_minutes: int = 30,
        max_sessions: int = 1000,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self.ttl = timedelta(minutes=ttl_minutes)
        self.max_sessions = max_sessions
        self.clock = clock
        self._sessions: "OrderedDict[str, PhoneVerification]" = OrderedDict()
        self._last_used: Dict[str, datetime] = {}

    def _touch(self, session_id: str, verification: PhoneVerification) -> None:
        self._sessions[session_id] = verification
        self._sessions.move_to_end(session_id)
        self._last_used[session_id] = self.clock()

    def _cleanup(self) -> None:
        cutoff = self.clock() - self.ttl
        expired = [sid for sid, used in self._last_used.items() if used < cutoff]
        for session_id in expired:
            self.discard(session_id)
        if expired:
            logger.debug(f"Expired {len(expired)} verification sessions")

        while len(self._sessions) > self.max_sessions:
            oldest, _ = self._sessions.popitem(last=False)
            self._last_used.pop(oldest, None)
            logger.debug(f"Evicted verification session {oldest[:8]}...")

    def _lookup(self, session_id: Optional[str]) -> Optional[PhoneVerification]:
        self._cleanup()
        if not session_id:
            return None
        return self._sessions.get(session_id)

    def get_or_create(self, session_id: Optional[str] = None) -> Tuple[str, PhoneVerification]:
        verification = self._lookup(session_id)
        if verification is None:
            session_id = session_id or str(uuid.uuid4())
            verification = PhoneVerification()
        self._touch(session_id, verification)
        self._cleanup()
        return session_id, verification

    def get(self, session_id: str) -> PhoneVerification:
        verification = self._lookup(session_id)
        if verification is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Verification session {session_id} not found"
            )
        self._touch(session_id, verification)
        return verification

    def discard(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)
        self._last_used.pop(session_id, None)

    def __len__(self) -> int:
        return len(self._sessions)


verification_registry = VerificationRegistry(
    ttl_minutes=settings.verification_ttl_minutes,
    max_sessions=settings.verification_max_sessions,
)


def get_verification_registry() -> VerificationRegistry:
    """Dependency injection for the verification registry"""
    return verification_registry
