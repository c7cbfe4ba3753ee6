"""View state of the booking form and the transitions between its phases.

Every transition is a pure function: it takes a ``ViewState`` and returns a
new one, leaving network calls to the caller (see ``booking.client.form``).
"""
from dataclasses import dataclass, replace
from enum import Enum

from booking.api.schemas.appointment import BookingConfirmation, SlotInfo

MISSING_FIELDS = "Please fill in all fields and select a time slot"


class Phase(str, Enum):
    IDLE = "idle"
    DATE_SELECTED = "date-selected"
    SLOTS_LOADED = "slots-loaded"
    TIME_SELECTED = "time-selected"
    SUBMITTING = "submitting"
    CONFIRMED = "confirmed"
    ERROR_SHOWN = "error-shown"


@dataclass(frozen=True)
class ViewState:
    phase: Phase = Phase.IDLE
    date: str = ""
    slots: tuple[SlotInfo, ...] = ()
    time: str = ""
    name: str = ""
    email: str = ""
    loading: bool = False
    error: str = ""
    confirmation: BookingConfirmation | None = None


def available_slots(state: ViewState) -> list[SlotInfo]:
    return [s for s in state.slots if s.available]


def select_date(state: ViewState, date: str) -> ViewState:
    if not date:
        return replace(
            state, phase=Phase.IDLE, date="", slots=(), time="",
            confirmation=None, error="", loading=False,
        )
    return replace(
        state, phase=Phase.DATE_SELECTED, date=date, time="",
        confirmation=None, error="", loading=True,
    )


def slots_loaded(state: ViewState, slots: list[SlotInfo]) -> ViewState:
    return replace(state, phase=Phase.SLOTS_LOADED, slots=tuple(slots), loading=False)


def slots_refreshed(state: ViewState, slots: list[SlotInfo]) -> ViewState:
    """New availability without leaving the current phase (e.g. after a confirmation)."""
    return replace(state, slots=tuple(slots))


def slots_failed(state: ViewState, message: str) -> ViewState:
    return replace(state, phase=Phase.ERROR_SHOWN, slots=(), loading=False, error=message)


def select_time(state: ViewState, time: str) -> ViewState:
    """Only an available slot of the loaded list can be picked."""
    if time not in {s.time for s in available_slots(state)}:
        return state
    return replace(state, phase=Phase.TIME_SELECTED, time=time)


def edit_contact(state: ViewState, name: str | None = None, email: str | None = None) -> ViewState:
    return replace(
        state,
        name=state.name if name is None else name,
        email=state.email if email is None else email,
    )


def submit(state: ViewState) -> ViewState:
    if not state.name.strip() or not state.email.strip() or not state.date or not state.time:
        return replace(state, phase=Phase.ERROR_SHOWN, error=MISSING_FIELDS)
    return replace(state, phase=Phase.SUBMITTING, loading=True, error="")


def booking_confirmed(state: ViewState, confirmation: BookingConfirmation) -> ViewState:
    # The date stays so the slots can be fetched again right away
    return replace(
        state, phase=Phase.CONFIRMED, confirmation=confirmation,
        name="", email="", time="", loading=False, error="",
    )


def booking_failed(state: ViewState, message: str) -> ViewState:
    return replace(state, phase=Phase.ERROR_SHOWN, loading=False, error=message)


def retry(state: ViewState) -> ViewState:
    if not state.date:
        return replace(state, phase=Phase.IDLE, error="", confirmation=None)
    return replace(state, phase=Phase.DATE_SELECTED, error="", confirmation=None)
