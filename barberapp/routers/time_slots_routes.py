# barberapp/routers/time_slots_routes.py

import logging
from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlmodel import Session, select

from barberapp.db import get_session
from barberapp.models import Appointment, TimeSlot
from barberapp.schemas import (
    AppointmentStatus,
    AvailabilityResponse,
    RecordState,
    TimeSlotCreate,
    TimeSlotPublic,
)
from barberapp.deps import get_current_admin
from barberapp.core import available_slots, is_bookable_date, normalize_time_slot
from barberapp.data import DEFAULT_TIME_SLOTS

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["time-slots"],
)


def active_time_slots(session: Session) -> List[TimeSlot]:
    return session.exec(
        select(TimeSlot)
        .where(TimeSlot.state == RecordState.active)
        .order_by(TimeSlot.time)
    ).all()


def free_slots_for(session: Session, day: date) -> List[str]:
    """Active slots not taken by a pending/confirmed appointment on that day."""
    if not is_bookable_date(day, date.today()):
        return []

    configured = [slot.time for slot in active_time_slots(session)]
    booked = session.exec(
        select(Appointment.time)
        .where(Appointment.date == day)
        .where(Appointment.status != AppointmentStatus.cancelled)
    ).all()

    return available_slots(configured, booked)


@router.get("/time-slots", response_model=List[TimeSlotPublic])
def list_time_slots(session: Session = Depends(get_session)):
    return active_time_slots(session)


@router.get("/availability", response_model=AvailabilityResponse)
def availability(
    date: date,
    session: Session = Depends(get_session),
):
    return {"date": date, "available_slots": free_slots_for(session, date)}


@router.get("/admin/time-slots", response_model=List[TimeSlotPublic])
def admin_list_time_slots(
    session: Session = Depends(get_session),
    current_admin: dict = Depends(get_current_admin),
):
    return active_time_slots(session)


@router.post("/admin/time-slots", response_model=TimeSlotPublic, status_code=201)
def add_time_slot(
    slot: TimeSlotCreate,
    session: Session = Depends(get_session),
    current_admin: dict = Depends(get_current_admin),
):
    try:
        time = normalize_time_slot(slot.time)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    existing = session.exec(
        select(TimeSlot)
        .where(TimeSlot.time == time)
        .where(TimeSlot.state == RecordState.active)
    ).first()
    if existing is not None:
        raise HTTPException(status_code=409, detail="Time slot already exists")

    db_slot = TimeSlot(time=time)
    session.add(db_slot)
    session.commit()
    session.refresh(db_slot)

    logger.info(f"Time slot {time} added")
    return db_slot


@router.delete("/admin/time-slots/{slot_id}", status_code=204)
def remove_time_slot(
    slot_id: int,
    session: Session = Depends(get_session),
    current_admin: dict = Depends(get_current_admin),
):
    db_slot = session.get(TimeSlot, slot_id)
    if db_slot is None or db_slot.state != RecordState.active:
        raise HTTPException(status_code=404, detail="Time slot not found")

    db_slot.state = RecordState.inactive
    session.add(db_slot)
    session.commit()

    logger.info(f"Time slot {db_slot.time} removed")
    return Response(status_code=204)


@router.post("/admin/time-slots/reset", response_model=List[TimeSlotPublic])
def reset_time_slots(
    session: Session = Depends(get_session),
    current_admin: dict = Depends(get_current_admin),
):
    # 1) Deactivate every active slot
    for db_slot in active_time_slots(session):
        db_slot.state = RecordState.inactive
        session.add(db_slot)

    # 2) Insert the default set
    for time in DEFAULT_TIME_SLOTS:
        session.add(TimeSlot(time=time))

    session.commit()

    logger.info("Time slots reset to defaults")
    return active_time_slots(session)
