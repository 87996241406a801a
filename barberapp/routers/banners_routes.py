# barberapp/routers/banners_routes.py

import logging
from typing import List, Optional

from fastapi import APIRouter, Cookie, Depends, HTTPException, Response
from sqlmodel import Session, select

from barberapp import config
from barberapp.db import get_session
from barberapp.models import Banner
from barberapp.schemas import BannerCreate, BannerPublic, PopupResponse, RecordState
from barberapp.deps import get_current_admin
from barberapp.core import should_show_popup
from barberapp.data import POPUP_COOKIE

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["banners"],
)


def active_banners(session: Session) -> List[Banner]:
    # Newest first
    return session.exec(
        select(Banner)
        .where(Banner.state == RecordState.active)
        .order_by(Banner.created_at.desc(), Banner.id.desc())
    ).all()


@router.get("/banners/popup", response_model=PopupResponse)
def banner_popup(
    response: Response,
    popup_shown: Optional[str] = Cookie(default=None, alias=POPUP_COOKIE),
    session: Session = Depends(get_session),
):
    banners = active_banners(session)

    if not should_show_popup(len(banners), popup_shown is not None):
        return {"show": False, "delay_seconds": config.POPUP_DELAY_SECONDS, "banners": []}

    # Session cookie: no max_age, gone when the browser closes
    response.set_cookie(POPUP_COOKIE, "true", httponly=True, samesite="lax")
    return {"show": True, "delay_seconds": config.POPUP_DELAY_SECONDS, "banners": banners}


@router.get("/admin/banners", response_model=List[BannerPublic])
def admin_list_banners(
    session: Session = Depends(get_session),
    current_admin: dict = Depends(get_current_admin),
):
    return active_banners(session)


@router.post("/admin/banners", response_model=BannerPublic, status_code=201)
def create_banner(
    banner: BannerCreate,
    session: Session = Depends(get_session),
    current_admin: dict = Depends(get_current_admin),
):
    title = banner.title.strip()
    if not title:
        raise HTTPException(status_code=422, detail="Title is required")

    db_banner = Banner(
        title=title,
        description=banner.description or None,
        image_url=banner.image_url or None,
    )
    session.add(db_banner)
    session.commit()
    session.refresh(db_banner)

    logger.info(f"Banner '{db_banner.title}' created (id={db_banner.id})")
    return db_banner


@router.delete("/admin/banners/{banner_id}", status_code=204)
def remove_banner(
    banner_id: int,
    session: Session = Depends(get_session),
    current_admin: dict = Depends(get_current_admin),
):
    db_banner = session.get(Banner, banner_id)
    if db_banner is None or db_banner.state != RecordState.active:
        raise HTTPException(status_code=404, detail="Banner not found")

    db_banner.state = RecordState.inactive
    session.add(db_banner)
    session.commit()

    logger.info(f"Banner '{db_banner.title}' removed")
    return Response(status_code=204)
