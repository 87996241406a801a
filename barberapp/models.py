# barberapp/models.py

from typing import Optional
from datetime import datetime, timezone, date as Date

from sqlmodel import SQLModel, Field, Relationship

from .schemas import AppointmentStatus, RecordState


class CatalogRecord(SQLModel):
    # Soft delete: catalog rows are never removed, only marked inactive
    state: RecordState = Field(default=RecordState.active, index=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class Service(CatalogRecord, table=True):
    __tablename__ = "servicos"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    description: Optional[str] = None
    price: float = Field(ge=0)
    duration_minutes: int = 30


class TimeSlot(CatalogRecord, table=True):
    __tablename__ = "horarios_disponiveis"

    id: Optional[int] = Field(default=None, primary_key=True)
    time: str = Field(index=True)  # "HH:MM"


class Banner(CatalogRecord, table=True):
    __tablename__ = "anuncios"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    description: Optional[str] = None
    image_url: Optional[str] = None


class Appointment(SQLModel, table=True):
    __tablename__ = "agendamentos"

    id: Optional[int] = Field(default=None, primary_key=True)

    name: str
    phone: str = Field(index=True)  # 11 normalized digits
    email: Optional[str] = None
    date: Date = Field(index=True)
    time: str  # "HH:MM"
    service_id: Optional[int] = Field(default=None, foreign_key="servicos.id")
    status: AppointmentStatus = Field(default=AppointmentStatus.pending)
    note: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    service: Optional[Service] = Relationship()
