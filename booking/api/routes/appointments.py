from fastapi import APIRouter, Depends, Query, status

from booking.api.deps import get_store
from booking.api.schemas.appointment import (
    BookAppointmentRequest,
    BookingConfirmation,
    ErrorResponse,
    SlotInfo,
)
from booking.core.store import AppointmentStore
from booking.models.appointment import Appointment, AppointmentPublic
from booking.services.appointment_service import create_appointment, validate_booking
from booking.services.slot_service import get_available_slots_for_date

router = APIRouter(prefix="/appointments", tags=["appointments"])

BOOKED_MESSAGE = "Appointment booked successfully!"


def _to_public(a: Appointment) -> AppointmentPublic:
    return AppointmentPublic(id=a.id, name=a.name, date=a.date, time=a.time)


@router.get("/", response_model=list[SlotInfo], include_in_schema=False)
@router.get(
    "",
    response_model=list[SlotInfo],
    responses={400: {"model": ErrorResponse}},
)
async def list_slots(
    date_param: str | None = Query(None, alias="date"),
    store: AppointmentStore = Depends(get_store),
) -> list[SlotInfo]:
    """Return every slot of the given date with its availability."""
    slots = get_available_slots_for_date(store, date_param)
    return [SlotInfo(time=t, available=avail) for t, avail in slots]


@router.post(
    "/",
    response_model=BookingConfirmation,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
@router.post(
    "",
    response_model=BookingConfirmation,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def book_appointment(
    body: BookAppointmentRequest,
    store: AppointmentStore = Depends(get_store),
) -> BookingConfirmation:
    data = validate_booking(body.name, body.email, body.date, body.time)
    appointment = create_appointment(store, data)
    return BookingConfirmation(message=BOOKED_MESSAGE, appointment=_to_public(appointment))
