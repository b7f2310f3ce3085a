from fastapi import APIRouter, Depends

from chikitsamitra.schemas.booking import (
    PhoneChangeRequest,
    SendCodeRequest,
    VerificationResponse,
    VerifyCodeRequest,
)
from chikitsamitra.services.verification_service import (
    INVALID_CODE_MESSAGE,
    PhoneVerification,
    PhoneVerificationError,
    VerificationRegistry,
    get_verification_registry,
)
from chikitsamitra.utils.response import APIResponse

router = APIRouter(prefix="/verification", tags=["Phone Verification"])


def _state(session_id: str, verification: PhoneVerification, **extra) -> VerificationResponse:
    return VerificationResponse(
        session_id=session_id,
        status=verification.status,
        phone_verified=verification.is_verified,
        phone_editable=verification.phone_editable,
        submit_enabled=verification.submit_enabled,
        **extra
    )


@router.post("/send")
def send_code(
    request: SendCodeRequest,
    registry: VerificationRegistry = Depends(get_verification_registry)
):
    """Send (simulate) a one-time code to the phone number"""
    session_id, verification = registry.get_or_create(request.session_id)
    code = verification.send_code(request.phone)
    message = f"Simulated OTP sent to {verification.phone}. Use: {code}"
    return APIResponse.success(
        _state(session_id, verification, simulated_code=code, message=message),
        message=message
    )


@router.post("/verify")
def verify_code(
    request: VerifyCodeRequest,
    registry: VerificationRegistry = Depends(get_verification_registry)
):
    verification = registry.get(request.session_id)
    if not verification.verify(request.code):
        raise PhoneVerificationError(INVALID_CODE_MESSAGE)
    message = "Phone number verified successfully!"
    return APIResponse.success(_state(request.session_id, verification, message=message), message=message)


@router.post("/phone")
def phone_changed(
    request: PhoneChangeRequest,
    registry: VerificationRegistry = Depends(get_verification_registry)
):
    """Report an edit of the phone field; a verified number becomes unverified"""
    session_id, verification = registry.get_or_create(request.session_id)
    verification.phone_changed(request.phone)
    return APIResponse.success(_state(session_id, verification))
