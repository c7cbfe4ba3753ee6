"""Test booking form view-state transitions."""
from booking.api.schemas.appointment import BookingConfirmation, SlotInfo
from booking.client import state as view
from booking.client.state import Phase, ViewState
from booking.models.appointment import AppointmentPublic


def _slots():
    return [
        SlotInfo(time="09:00", available=False),
        SlotInfo(time="09:30", available=True),
        SlotInfo(time="10:00", available=True),
    ]


def _ready() -> ViewState:
    s = view.select_date(ViewState(), "2099-06-01")
    s = view.slots_loaded(s, _slots())
    s = view.select_time(s, "09:30")
    return view.edit_contact(s, name="Jane Doe", email="jane@x.com")


def _confirmation():
    return BookingConfirmation(
        message="Appointment booked successfully!",
        appointment=AppointmentPublic(id="abc", name="Jane Doe", date="2099-06-01", time="09:30"),
    )


def test_initial_state_is_idle():
    s = ViewState()
    assert s.phase is Phase.IDLE
    assert s.slots == ()


def test_select_date_starts_loading_and_clears_selection():
    s = view.select_date(_ready(), "2099-06-02")
    assert s.phase is Phase.DATE_SELECTED
    assert s.loading
    assert s.time == ""
    assert s.error == ""


def test_clearing_date_returns_to_idle():
    s = view.select_date(_ready(), "")
    assert s.phase is Phase.IDLE
    assert s.slots == ()


def test_slots_loaded():
    s = view.slots_loaded(view.select_date(ViewState(), "2099-06-01"), _slots())
    assert s.phase is Phase.SLOTS_LOADED
    assert not s.loading
    assert [x.time for x in view.available_slots(s)] == ["09:30", "10:00"]


def test_slots_failed_shows_error():
    s = view.slots_failed(view.select_date(ViewState(), "2020-01-01"), "Invalid date format or date in the past")
    assert s.phase is Phase.ERROR_SHOWN
    assert s.error == "Invalid date format or date in the past"
    assert s.slots == ()


def test_unavailable_time_cannot_be_selected():
    loaded = view.slots_loaded(view.select_date(ViewState(), "2099-06-01"), _slots())
    assert view.select_time(loaded, "09:00") is loaded
    assert view.select_time(loaded, "13:00") is loaded
    assert view.select_time(loaded, "10:00").phase is Phase.TIME_SELECTED


def test_submit_with_missing_contact_shows_error():
    s = view.edit_contact(_ready(), name="   ")
    s = view.submit(s)
    assert s.phase is Phase.ERROR_SHOWN
    assert s.error == view.MISSING_FIELDS


def test_submit_moves_to_submitting():
    s = view.submit(_ready())
    assert s.phase is Phase.SUBMITTING
    assert s.loading


def test_confirmation_clears_form_but_keeps_date():
    s = view.booking_confirmed(view.submit(_ready()), _confirmation())
    assert s.phase is Phase.CONFIRMED
    assert s.confirmation.appointment.time == "09:30"
    assert (s.name, s.email, s.time) == ("", "", "")
    assert s.date == "2099-06-01"


def test_failure_keeps_entered_data_and_retry_returns_to_date_selected():
    failed = view.booking_failed(view.submit(_ready()), "This time slot is already booked. Please choose another time.")
    assert failed.phase is Phase.ERROR_SHOWN
    assert failed.name == "Jane Doe"
    assert not failed.loading

    retried = view.retry(failed)
    assert retried.phase is Phase.DATE_SELECTED
    assert retried.error == ""


def test_transitions_do_not_mutate_input():
    before = _ready()
    view.submit(before)
    assert before.phase is Phase.TIME_SELECTED
