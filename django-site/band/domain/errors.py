"""Domain error codes for the band module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    SUBMISSION_DELIVERY_FAILED = "SUBMISSION_DELIVERY_FAILED"
    UNKNOWN_SECTION = "UNKNOWN_SECTION"
    INVALID_PAGE_STATE = "INVALID_PAGE_STATE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class SubmissionDeliveryError(DomainError):
    """Raised when a contact submission could not be handed over."""

    def __init__(self, message: str = "No pudimos enviar tu mensaje. Inténtalo de nuevo.") -> None:
        super().__init__(
            code=ErrorCode.SUBMISSION_DELIVERY_FAILED,
            message=message,
        )


class UnknownSectionError(DomainError):
    """Raised when a navigation anchor is not one of the page sections."""

    def __init__(self, anchor: str) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_SECTION,
            message="Section not found",
        )
        object.__setattr__(self, "anchor", anchor)


class InvalidPageStateError(DomainError):
    """Raised when a stored page state snapshot cannot be decoded."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PAGE_STATE,
            message="Invalid page state",
        )
