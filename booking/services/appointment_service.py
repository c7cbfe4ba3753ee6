import logging
from datetime import date

from booking.core.errors import ConflictError, ValidationError
from booking.core.store import AppointmentStore
from booking.models.appointment import Appointment, AppointmentCreate
from booking.services import validation
from booking.services.slot_service import TIME_SLOTS

logger = logging.getLogger(__name__)

SLOT_TAKEN = "This time slot is already booked. Please choose another time."


def validate_booking(
    name: str | None,
    email: str | None,
    date_param: str | None,
    time: str | None,
    today: date | None = None,
) -> AppointmentCreate:
    """Check fields in a fixed order; the first failure decides the error message."""
    if not name or not email or not date_param or not time:
        raise ValidationError(validation.FIELDS_REQUIRED)
    if len(name.strip()) < 2:
        raise ValidationError(validation.NAME_TOO_SHORT)
    if not validation.is_valid_email(email):
        raise ValidationError(validation.EMAIL_INVALID)
    if not validation.is_bookable_date(date_param, today):
        raise ValidationError(validation.DATE_INVALID)
    if not validation.is_valid_time(time):
        raise ValidationError(validation.TIME_INVALID)
    if time not in TIME_SLOTS:
        raise ValidationError(validation.TIME_NOT_A_SLOT)
    return AppointmentCreate(name=name, email=email, date=date_param, time=time)


def create_appointment(store: AppointmentStore, data: AppointmentCreate) -> Appointment:
    appointment = Appointment(
        name=data.name.strip(),
        email=data.email.strip().lower(),
        date=data.date,
        time=data.time,
    )
    if not store.add_if_free(appointment):
        logger.warning("Slot conflict: %s %s already booked", data.date, data.time)
        raise ConflictError(SLOT_TAKEN)
    logger.info("Appointment %s booked for %s %s", appointment.id, appointment.date, appointment.time)
    return appointment
