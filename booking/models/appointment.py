from datetime import datetime
from uuid import uuid4

from sqlmodel import Field, SQLModel


def _new_id() -> str:
    return str(uuid4())


class Appointment(SQLModel):
    id: str = Field(default_factory=_new_id)
    name: str
    email: str
    date: str  # YYYY-MM-DD
    time: str  # HH:MM, one of the fixed slots
    created_at: datetime = Field(default_factory=datetime.now)


class AppointmentCreate(SQLModel):
    name: str
    email: str
    date: str
    time: str


class AppointmentPublic(SQLModel):
    """What the confirmation echoes back; email and created_at stay server-side."""

    id: str
    name: str
    date: str
    time: str
