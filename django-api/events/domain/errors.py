"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    MISSING_PATH_PARAMETER = "MISSING_PATH_PARAMETER"
    INVALID_BODY = "INVALID_BODY"
    MISSING_PARAMETERS = "MISSING_PARAMETERS"
    INVALID_PAGINATION = "INVALID_PAGINATION"
    INVALID_ID_FILTER = "INVALID_ID_FILTER"
    INVALID_SCHEDULE_TYPE = "INVALID_SCHEDULE_TYPE"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    EVENT_NOT_MODIFIED = "EVENT_NOT_MODIFIED"
    NOT_IMPLEMENTED = "NOT_IMPLEMENTED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class MissingPathParameterError(DomainError):
    """Raised when a required path parameter is absent."""

    def __init__(self, name: str) -> None:
        super().__init__(
            code=ErrorCode.MISSING_PATH_PARAMETER,
            message=f"{name} (path parameter) missing",
        )
        self.name = name


class InvalidBodyError(DomainError):
    """Raised when a required JSON body is absent or malformed."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_BODY,
            message="body is missing JSON or JSON is invalid",
        )


class MissingParametersError(DomainError):
    """Raised when an operation's required fields are unset."""

    def __init__(self, missing: list[str]) -> None:
        super().__init__(
            code=ErrorCode.MISSING_PARAMETERS,
            message=f"parameters missing {', '.join(missing)}",
        )
        self.missing = missing


class InvalidPaginationError(DomainError):
    """Raised when page_size or page_number cannot be converted."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PAGINATION,
            message="could not initialize page_size and page_number",
        )


class InvalidIdFilterError(DomainError):
    """Raised when the list endpoint body lacks an id array."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ID_FILTER,
            message="json body is invalid; ensure id filter is present",
        )


class InvalidScheduleTypeError(DomainError):
    """Raised when the type query parameter is absent or unknown."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_SCHEDULE_TYPE,
            message="could not initialize type",
        )


class EventNotFoundError(DomainError):
    """Raised when the store reports no matching events."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )


class EventNotModifiedError(DomainError):
    """Raised when a store write reports that nothing changed."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_MODIFIED,
            message=f"{operation} did not modify any event",
        )
        self.operation = operation


class NotImplementedYetError(DomainError):
    """Raised by endpoints that are part of the contract but not built."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            code=ErrorCode.NOT_IMPLEMENTED,
            message=f"{operation} is not implemented",
        )
        self.operation = operation
