# barberapp/schemas.py

from pydantic import BaseModel, Field
from enum import Enum
from datetime import datetime, date
from typing import List, Optional


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class UserRole(str, Enum):
    admin = "admin"


class AppointmentStatus(str, Enum):
    pending = "pending"
    confirmed = "confirmed"
    cancelled = "cancelled"


class RecordState(str, Enum):
    active = "active"
    inactive = "inactive"


# --- services ---

class ServiceCreate(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    price: float = Field(ge=0)
    duration_minutes: int = Field(default=30, gt=0)


class ServicePublic(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    price: float
    duration_minutes: int
    state: RecordState


# --- time slots ---

class TimeSlotCreate(BaseModel):
    time: str


class TimeSlotPublic(BaseModel):
    id: int
    time: str
    state: RecordState


class AvailabilityResponse(BaseModel):
    date: date
    available_slots: List[str]


# --- banners ---

class BannerCreate(BaseModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    image_url: Optional[str] = None


class BannerPublic(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    state: RecordState
    created_at: datetime


class PopupResponse(BaseModel):
    show: bool
    delay_seconds: int
    banners: List[BannerPublic] = []


# --- appointments ---

class AppointmentCreate(BaseModel):
    name: str
    phone: str
    email: Optional[str] = None
    service_id: int
    date: date
    time: str


class AppointmentPublic(BaseModel):
    id: int
    name: str
    phone: str
    phone_display: str
    email: Optional[str] = None
    date: date
    time: str
    status: AppointmentStatus
    note: Optional[str] = None
    service: Optional[ServicePublic] = None


class StatusUpdate(BaseModel):
    status: AppointmentStatus
    note: Optional[str] = None


class CustomerCancel(BaseModel):
    phone: str


class AdminSummary(BaseModel):
    total: int
    pending: int
    confirmed: int
    cancelled: int
    confirmed_revenue: float


class BookingNotification(BaseModel):
    name: str
    phone: str
    service: str
    price: float
    date: str
    time: str
