from datetime import date

from booking.core.store import AppointmentStore
from booking.services.validation import require_bookable_date

FIRST_SLOT_HOUR = 9
LAST_SLOT_HOUR = 17
SLOT_MINUTES = 30


def generate_time_slots() -> list[str]:
    """Fixed slot universe: 09:00, 09:30, ... 17:00 (17 slots)."""
    slots: list[str] = []
    for hour in range(FIRST_SLOT_HOUR, LAST_SLOT_HOUR + 1):
        for minute in range(0, 60, SLOT_MINUTES):
            if hour == LAST_SLOT_HOUR and minute > 0:
                break
            slots.append(f"{hour:02d}:{minute:02d}")
    return slots


TIME_SLOTS: tuple[str, ...] = tuple(generate_time_slots())


def get_available_slots_for_date(
    store: AppointmentStore, date_param: str | None, today: date | None = None
) -> list[tuple[str, bool]]:
    """Returns list of (time, available) for every slot of the given date."""
    d = require_bookable_date(date_param, today)
    booked = store.booked_times(d)
    return [(t, t not in booked) for t in TIME_SLOTS]
