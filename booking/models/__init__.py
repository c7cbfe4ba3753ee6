from booking.models.appointment import Appointment, AppointmentCreate, AppointmentPublic

__all__ = [
    "Appointment",
    "AppointmentCreate",
    "AppointmentPublic",
]
