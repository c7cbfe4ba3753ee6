"""Test the in-memory appointment store."""
from concurrent.futures import ThreadPoolExecutor

from booking.core.store import AppointmentStore
from booking.models.appointment import Appointment


def _appointment(time="09:00", date="2099-06-01", name="Jane Doe"):
    return Appointment(name=name, email="jane@x.com", date=date, time=time)


def test_add_if_free_rejects_taken_slot(store):
    assert store.add_if_free(_appointment())
    assert not store.add_if_free(_appointment(name="John Roe"))
    assert store.add_if_free(_appointment(date="2099-06-02"))
    assert len(store) == 2


def test_booked_times_filters_by_date(store):
    store.add_if_free(_appointment(time="09:00"))
    store.add_if_free(_appointment(time="11:30"))
    store.add_if_free(_appointment(time="10:00", date="2099-06-02"))
    assert store.booked_times("2099-06-01") == {"09:00", "11:30"}
    assert store.booked_times("2099-06-03") == set()


def test_snapshot_is_a_copy(store):
    store.add_if_free(_appointment())
    snap = store.snapshot()
    snap.clear()
    assert len(store) == 1


def test_concurrent_bookings_for_one_slot_yield_one_success():
    store = AppointmentStore()
    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(pool.map(lambda i: store.add_if_free(_appointment(name=f"Guest {i}")), range(64)))
    assert results.count(True) == 1
    assert len(store) == 1


def test_stores_are_isolated():
    a, b = AppointmentStore(), AppointmentStore()
    a.add_if_free(_appointment())
    assert len(b) == 0
