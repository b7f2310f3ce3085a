import enum


class VerificationStatus(str, enum.Enum):
    UNVERIFIED = "unverified"
    CODE_SENT = "code_sent"
    VERIFIED = "verified"
