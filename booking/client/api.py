import logging

import httpx

from booking.api.schemas.appointment import BookingConfirmation, SlotInfo

logger = logging.getLogger(__name__)

SLOTS_FAILED = "Failed to fetch time slots"
BOOKING_FAILED = "Failed to book appointment"


class ApiError(Exception):
    """Failed call to the booking service; ``message`` is the text to show.

    ``status_code`` is 0 when no HTTP response was received.
    """

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def _error_message(resp: httpx.Response, fallback: str) -> str:
    try:
        data = resp.json()
    except ValueError:
        return fallback
    if isinstance(data, dict) and data.get("error"):
        return str(data["error"])
    return fallback


class BookingApiClient:
    def __init__(self, base_url: str = "http://localhost:3001", client: httpx.Client | None = None) -> None:
        self._client = client or httpx.Client(base_url=base_url)

    def close(self) -> None:
        self._client.close()

    def list_slots(self, date: str) -> list[SlotInfo]:
        try:
            resp = self._client.get("/api/appointments", params={"date": date})
        except httpx.HTTPError as e:
            logger.warning("Slot fetch for %s failed: %s", date, e)
            raise ApiError(0, SLOTS_FAILED) from e
        if resp.status_code != 200:
            raise ApiError(resp.status_code, _error_message(resp, SLOTS_FAILED))
        try:
            return [SlotInfo.model_validate(s) for s in resp.json()]
        except (ValueError, TypeError) as e:
            logger.warning("Unreadable slot list for %s: %s", date, e)
            raise ApiError(resp.status_code, SLOTS_FAILED) from e

    def create_appointment(self, name: str, email: str, date: str, time: str) -> BookingConfirmation:
        try:
            resp = self._client.post(
                "/api/appointments",
                json={"name": name, "email": email, "date": date, "time": time},
            )
        except httpx.HTTPError as e:
            logger.warning("Booking %s %s failed: %s", date, time, e)
            raise ApiError(0, BOOKING_FAILED) from e
        if resp.status_code != 201:
            logger.warning("Booking %s %s failed: status=%s", date, time, resp.status_code)
            raise ApiError(resp.status_code, _error_message(resp, BOOKING_FAILED))
        try:
            return BookingConfirmation.model_validate(resp.json())
        except ValueError as e:
            logger.warning("Unreadable booking confirmation for %s %s: %s", date, time, e)
            raise ApiError(resp.status_code, BOOKING_FAILED) from e
