from fastapi import Request

from booking.core.store import AppointmentStore


def get_store(request: Request) -> AppointmentStore:
    """The store created alongside the application in create_app()."""
    return request.app.state.store
