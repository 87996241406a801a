# barberapp/routers/appointments_routes.py

import logging
from typing import Optional, List

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Response
from sqlmodel import Session, select

from barberapp.db import get_session
from barberapp.models import Appointment, Service
from barberapp.schemas import (
    AdminSummary,
    AppointmentCreate,
    AppointmentPublic,
    AppointmentStatus,
    BookingNotification,
    CustomerCancel,
    RecordState,
    StatusUpdate,
)
from barberapp.deps import get_current_admin
from barberapp.core import InvalidTransition, apply_transition, normalize_time_slot
from barberapp.phone import format_phone, is_valid_phone, normalize_phone
from barberapp.notifications import notify_new_booking
from barberapp.routers.time_slots_routes import free_slots_for

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["appointments"],
)


def to_public(appt: Appointment) -> dict:
    return {
        "id": appt.id,
        "name": appt.name,
        "phone": appt.phone,
        "phone_display": format_phone(appt.phone),
        "email": appt.email,
        "date": appt.date,
        "time": appt.time,
        "status": appt.status,
        "note": appt.note,
        "service": appt.service,
    }


def get_appointment_or_404(session: Session, appt_id: int) -> Appointment:
    target = session.get(Appointment, appt_id)
    if target is None:
        raise HTTPException(status_code=404, detail="Appointment not found")
    return target


def change_status(session: Session, target: Appointment, status: AppointmentStatus, note: Optional[str] = None):
    try:
        target.status = apply_transition(target.status, status)
    except InvalidTransition as e:
        raise HTTPException(status_code=409, detail=str(e))

    # Status and note go out in the same write
    if note:
        target.note = note
    session.add(target)
    session.commit()
    session.refresh(target)


@router.post("/appointments", response_model=AppointmentPublic, status_code=201)
def create_appointment(
    appt: AppointmentCreate,
    background_tasks: BackgroundTasks,
    session: Session = Depends(get_session),
):
    # 1) Required fields
    name = appt.name.strip()
    if not name:
        raise HTTPException(status_code=422, detail="Name is required")

    phone = normalize_phone(appt.phone)
    if not is_valid_phone(phone):
        raise HTTPException(status_code=422, detail="Phone must have DDD + 9 digits")

    try:
        time = normalize_time_slot(appt.time)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    # 2) Validate service
    service = session.get(Service, appt.service_id)
    if service is None:
        raise HTTPException(status_code=404, detail="Service not found")
    if service.state != RecordState.active:
        raise HTTPException(status_code=422, detail="Service not available")

    # 3) Date and slot must still be free (past dates and Sundays have none)
    free = free_slots_for(session, appt.date)
    if not free:
        raise HTTPException(status_code=422, detail="No time slots available on that date")
    if time not in free:
        raise HTTPException(status_code=409, detail="Time slot is no longer available")

    # 4) Create and save appointment
    db_appt = Appointment(
        name=name,
        phone=phone,
        email=(appt.email or "").strip() or None,
        date=appt.date,
        time=time,
        service_id=service.id,
        status=AppointmentStatus.pending,
    )
    session.add(db_appt)
    session.commit()
    session.refresh(db_appt)

    logger.info(f"Appointment {db_appt.id} booked for {db_appt.date} {db_appt.time}")

    # 5) Best-effort push notification, after the response
    background_tasks.add_task(
        notify_new_booking,
        BookingNotification(
            name=db_appt.name,
            phone=format_phone(db_appt.phone),
            service=service.name,
            price=service.price,
            date=db_appt.date.strftime("%d/%m/%Y"),
            time=db_appt.time,
        ),
    )

    return to_public(db_appt)


@router.get("/appointments/lookup", response_model=List[AppointmentPublic])
def lookup_appointments(
    phone: str,
    session: Session = Depends(get_session),
):
    digits = normalize_phone(phone)
    if not digits:
        raise HTTPException(status_code=422, detail="Phone is required")

    appts = session.exec(
        select(Appointment)
        .where(Appointment.phone == digits)
        .order_by(Appointment.date, Appointment.time)
    ).all()
    return [to_public(a) for a in appts]


@router.patch("/appointments/{appt_id}/cancel", response_model=AppointmentPublic)
def customer_cancel_appointment(
    appt_id: int,
    body: CustomerCancel,
    session: Session = Depends(get_session),
):
    target = get_appointment_or_404(session, appt_id)

    # The phone used to book is the only proof of ownership
    if normalize_phone(body.phone) != target.phone:
        raise HTTPException(status_code=403, detail="Forbidden")

    change_status(session, target, AppointmentStatus.cancelled)
    logger.info(f"Appointment {target.id} cancelled by customer")
    return to_public(target)


@router.get("/admin/appointments", response_model=List[AppointmentPublic])
def list_appointments(
    status: Optional[AppointmentStatus] = None,
    session: Session = Depends(get_session),
    current_admin: dict = Depends(get_current_admin),
):
    stmt = select(Appointment)
    if status is not None:
        stmt = stmt.where(Appointment.status == status)
    stmt = stmt.order_by(Appointment.date, Appointment.time)

    appts = session.exec(stmt).all()
    return [to_public(a) for a in appts]


@router.patch("/admin/appointments/{appt_id}/status", response_model=AppointmentPublic)
def update_appointment_status(
    appt_id: int,
    update: StatusUpdate,
    session: Session = Depends(get_session),
    current_admin: dict = Depends(get_current_admin),
):
    target = get_appointment_or_404(session, appt_id)
    change_status(session, target, update.status, (update.note or "").strip() or None)

    logger.info(f"Appointment {target.id} set to {target.status.value}")
    return to_public(target)


@router.delete("/admin/appointments/{appt_id}", status_code=204)
def delete_appointment(
    appt_id: int,
    session: Session = Depends(get_session),
    current_admin: dict = Depends(get_current_admin),
):
    target = get_appointment_or_404(session, appt_id)
    session.delete(target)
    session.commit()

    logger.info(f"Appointment {appt_id} deleted")
    return Response(status_code=204)


@router.get("/admin/summary", response_model=AdminSummary)
def appointments_summary(
    session: Session = Depends(get_session),
    current_admin: dict = Depends(get_current_admin),
):
    appts = session.exec(select(Appointment)).all()

    counts = {status: 0 for status in AppointmentStatus}
    revenue = 0.0
    for a in appts:
        counts[a.status] += 1
        if a.status == AppointmentStatus.confirmed and a.service is not None:
            revenue += a.service.price

    return {
        "total": len(appts),
        "pending": counts[AppointmentStatus.pending],
        "confirmed": counts[AppointmentStatus.confirmed],
        "cancelled": counts[AppointmentStatus.cancelled],
        "confirmed_revenue": round(revenue, 2),
    }
