"""Domain error codes for the hotels module."""

from enum import Enum

from common.errors import DomainError, ErrorKind


class ErrorCode(Enum):
    """Domain error codes."""

    HOTEL_NOT_FOUND = "HOTEL_NOT_FOUND"
    NO_HOTELS_AVAILABLE = "NO_HOTELS_AVAILABLE"
    INVALID_HOTEL_ID = "INVALID_HOTEL_ID"


class HotelNotFoundError(DomainError):
    """Raised when a hotel is not found."""

    def __init__(self, hotel_id: int) -> None:
        super().__init__(
            code=ErrorCode.HOTEL_NOT_FOUND,
            kind=ErrorKind.NOT_FOUND,
            message="hotel not found",
        )
        self.hotel_id = hotel_id


class NoHotelsAvailableError(DomainError):
    """Raised when there are no hotels to list."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NO_HOTELS_AVAILABLE,
            kind=ErrorKind.NOT_FOUND,
            message="no hotels available",
        )


class InvalidHotelIdError(DomainError):
    """Raised when a hotel ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_HOTEL_ID,
            kind=ErrorKind.INVALID,
            message="invalid hotel id format",
        )
