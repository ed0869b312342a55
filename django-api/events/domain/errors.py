"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    MISSING_FIELDS = "MISSING_FIELDS"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_REGISTRATION_ID = "INVALID_REGISTRATION_ID"
    INVALID_HOURS_AHEAD = "INVALID_HOURS_AHEAD"
    INVALID_CODE_FORMAT = "INVALID_CODE_FORMAT"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    REGISTRATION_NOT_FOUND = "REGISTRATION_NOT_FOUND"
    ALREADY_VERIFIED = "ALREADY_VERIFIED"
    INVALID_CODE = "INVALID_CODE"
    CODE_EXPIRED = "CODE_EXPIRED"
    EVENT_INACTIVE = "EVENT_INACTIVE"
    EVENT_FULL = "EVENT_FULL"
    VERIFICATION_FAILED = "VERIFICATION_FAILED"
    INFRASTRUCTURE = "INFRASTRUCTURE"


VALIDATION_CODES = frozenset(
    {
        ErrorCode.MISSING_FIELDS,
        ErrorCode.INVALID_EVENT_ID,
        ErrorCode.INVALID_REGISTRATION_ID,
        ErrorCode.INVALID_HOURS_AHEAD,
        ErrorCode.INVALID_CODE_FORMAT,
    }
)
NOT_FOUND_CODES = frozenset({ErrorCode.EVENT_NOT_FOUND, ErrorCode.REGISTRATION_NOT_FOUND})


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class MissingFieldsError(DomainError):
    """Raised when a verification request lacks one of its fields."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.MISSING_FIELDS,
            message="Missing required fields: eventId, participantId, verificationCode",
        )


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class InvalidRegistrationIdError(DomainError):
    """Raised when a participant ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_REGISTRATION_ID,
            message="Invalid registration ID format",
        )


class InvalidCodeFormatError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CODE_FORMAT,
            message="Verification code must be a string",
        )


class InvalidHoursAheadError(DomainError):
    """Raised when the reminder look-ahead is not a non-negative number."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_HOURS_AHEAD,
            message="hoursAhead must be a positive number",
        )


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        object.__setattr__(self, "event_id", event_id)


class PendingRegistrationNotFoundError(DomainError):
    """Raised when the event has no pending participant with the given id."""

    def __init__(self, participant_id: str) -> None:
        super().__init__(
            code=ErrorCode.REGISTRATION_NOT_FOUND,
            message="Pending registration not found",
        )
        object.__setattr__(self, "participant_id", participant_id)


class AlreadyVerifiedError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ALREADY_VERIFIED,
            message="Registration already verified",
        )


class InvalidVerificationCodeError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CODE,
            message="Invalid verification code",
        )


class VerificationCodeExpiredError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.CODE_EXPIRED,
            message="Verification code expired. Please register again.",
        )


class EventInactiveError(DomainError):
    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_INACTIVE,
            message="Event is no longer active",
        )


class EventFullError(DomainError):
    """Raised when every seat of the event is taken by an active registration."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_FULL,
            message="Event is full. No available slots remaining.",
        )


class VerificationNotAppliedError(DomainError):
    """Raised when the store reports the verification update did not apply."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.VERIFICATION_FAILED,
            message="Failed to verify registration",
        )
