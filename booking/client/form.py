import logging

from booking.client import state as view
from booking.client.api import ApiError, BookingApiClient
from booking.client.state import ViewState

logger = logging.getLogger(__name__)


class BookingForm:
    """Drives a ViewState through the booking flow against the service."""

    def __init__(self, api: BookingApiClient, initial: ViewState | None = None) -> None:
        self.api = api
        self.state = initial or ViewState()

    def choose_date(self, date: str) -> ViewState:
        self.state = view.select_date(self.state, date)
        if date:
            self._fetch_slots()
        return self.state

    def choose_time(self, time: str) -> ViewState:
        self.state = view.select_time(self.state, time)
        return self.state

    def fill_contact(self, name: str | None = None, email: str | None = None) -> ViewState:
        self.state = view.edit_contact(self.state, name=name, email=email)
        return self.state

    def submit(self) -> ViewState:
        self.state = view.submit(self.state)
        if self.state.phase is not view.Phase.SUBMITTING:
            return self.state
        try:
            confirmation = self.api.create_appointment(
                name=self.state.name.strip(),
                email=self.state.email.strip(),
                date=self.state.date,
                time=self.state.time,
            )
        except ApiError as e:
            self.state = view.booking_failed(self.state, e.message)
            return self.state
        self.state = view.booking_confirmed(self.state, confirmation)
        # Refresh so the booked slot shows as taken
        self._fetch_slots(keep_phase=True)
        return self.state

    def retry(self) -> ViewState:
        self.state = view.retry(self.state)
        return self.state

    def _fetch_slots(self, keep_phase: bool = False) -> None:
        try:
            slots = self.api.list_slots(self.state.date)
        except ApiError as e:
            logger.debug("Slot fetch for %s failed: %s", self.state.date, e.message)
            if not keep_phase:
                self.state = view.slots_failed(self.state, e.message)
            return
        if keep_phase:
            self.state = view.slots_refreshed(self.state, slots)
        else:
            self.state = view.slots_loaded(self.state, slots)
