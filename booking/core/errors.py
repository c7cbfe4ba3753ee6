from fastapi import status


class BookingError(Exception):
    """Base for errors that end a booking request with a client-visible message."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(BookingError):
    """Missing, malformed or past-dated input."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(BookingError):
    """The requested slot is already held by another appointment."""

    status_code = status.HTTP_409_CONFLICT
