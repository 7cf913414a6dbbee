"""Domain error codes for the pricing module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    PRICE_NOT_FOUND = "PRICE_NOT_FOUND"
    INVALID_ACTION = "INVALID_ACTION"
    UNKNOWN_SERVICE = "UNKNOWN_SERVICE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class PriceLookupError(DomainError, LookupError):
    """Raised when the price table has no entry for a year or service."""

    def __init__(self, year, service=None) -> None:
        super().__init__(
            code=ErrorCode.PRICE_NOT_FOUND,
            message="No price listed for the requested year and service",
        )
        object.__setattr__(self, "year", year)
        object.__setattr__(self, "service", service)


class InvalidActionError(DomainError):
    """Raised when a selection action has an unknown type."""

    def __init__(self, action_type) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ACTION,
            message=f"Unhandled action type: {action_type}",
        )
        object.__setattr__(self, "action_type", action_type)


class UnknownServiceError(DomainError, LookupError):
    """Raised when a selection names a service that is not offered."""

    def __init__(self, service) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_SERVICE,
            message=f"Unknown service: {service}",
        )
        object.__setattr__(self, "service", service)
