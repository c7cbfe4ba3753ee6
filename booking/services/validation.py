import re
from datetime import date

from booking.core.errors import ValidationError

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
TIME_RE = re.compile(r"^([01]?[0-9]|2[0-3]):[0-5][0-9]$")

DATE_REQUIRED = "Date parameter is required (YYYY-MM-DD format)"
DATE_INVALID = "Invalid date format or date in the past"
FIELDS_REQUIRED = "All fields are required: name, email, date, time"
NAME_TOO_SHORT = "Name must be at least 2 characters long"
EMAIL_INVALID = "Invalid email format"
TIME_INVALID = "Invalid time format"
TIME_NOT_A_SLOT = "Time must be one of the available slots"


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_RE.fullmatch(email))


def is_valid_time(time: str) -> bool:
    return bool(TIME_RE.fullmatch(time))


def is_bookable_date(value: str, today: date | None = None) -> bool:
    """YYYY-MM-DD, a real calendar date, and not before today (server local date)."""
    if not DATE_RE.fullmatch(value):
        return False
    try:
        parsed = date.fromisoformat(value)
    except ValueError:
        return False
    return parsed >= (today or date.today())


def require_bookable_date(value: str | None, today: date | None = None) -> str:
    if not value:
        raise ValidationError(DATE_REQUIRED)
    if not is_bookable_date(value, today):
        raise ValidationError(DATE_INVALID)
    return value
