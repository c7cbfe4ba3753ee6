from pydantic import BaseModel

from booking.models.appointment import AppointmentPublic


class SlotInfo(BaseModel):
    time: str  # HH:MM
    available: bool


class BookAppointmentRequest(BaseModel):
    # Presence is checked by the booking service so the error message stays ordered
    name: str | None = None
    email: str | None = None
    date: str | None = None
    time: str | None = None


class BookingConfirmation(BaseModel):
    message: str
    appointment: AppointmentPublic


class ErrorResponse(BaseModel):
    error: str
