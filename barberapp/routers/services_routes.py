# barberapp/routers/services_routes.py

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlmodel import Session, select

from barberapp.db import get_session
from barberapp.models import Service
from barberapp.schemas import RecordState, ServiceCreate, ServicePublic
from barberapp.deps import get_current_admin

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["services"],
)


def active_services(session: Session) -> List[Service]:
    return session.exec(
        select(Service)
        .where(Service.state == RecordState.active)
        .order_by(Service.name)
    ).all()


@router.get("/services", response_model=List[ServicePublic])
def list_services(session: Session = Depends(get_session)):
    return active_services(session)


@router.get("/admin/services", response_model=List[ServicePublic])
def admin_list_services(
    session: Session = Depends(get_session),
    current_admin: dict = Depends(get_current_admin),
):
    return active_services(session)


@router.post("/admin/services", response_model=ServicePublic, status_code=201)
def create_service(
    service: ServiceCreate,
    session: Session = Depends(get_session),
    current_admin: dict = Depends(get_current_admin),
):
    name = service.name.strip()
    if not name:
        raise HTTPException(status_code=422, detail="Name and price are required")

    db_service = Service(
        name=name,
        description=service.description or None,
        price=service.price,
        duration_minutes=service.duration_minutes,
    )
    session.add(db_service)
    session.commit()
    session.refresh(db_service)

    logger.info(f"Service '{db_service.name}' created (id={db_service.id})")
    return db_service


@router.delete("/admin/services/{service_id}", status_code=204)
def remove_service(
    service_id: int,
    session: Session = Depends(get_session),
    current_admin: dict = Depends(get_current_admin),
):
    db_service = session.get(Service, service_id)
    if db_service is None or db_service.state != RecordState.active:
        raise HTTPException(status_code=404, detail="Service not found")

    # Appointments keep pointing at it; it only leaves the booking list
    db_service.state = RecordState.inactive
    session.add(db_service)
    session.commit()

    logger.info(f"Service '{db_service.name}' removed")
    return Response(status_code=204)
