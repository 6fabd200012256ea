# admin_dashboard/api/v1/endpoints/pages.py
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from admin_dashboard.api import deps
from admin_dashboard.core.config import settings
from admin_dashboard.core.limiter import limiter
from admin_dashboard.db.session import get_db
from admin_dashboard.schemas.pages import TicketsPageProps, WaitlistPageProps
from admin_dashboard.services.dashboard import load_tickets_page, load_waitlist_page

router = APIRouter(prefix="/pages", tags=["Pages"])


@router.get("/waitlist", response_model=WaitlistPageProps)
@limiter.limit(settings.RATE_LIMIT)
def waitlist_page_props(
    request: Request,
    db: Session = Depends(get_db),
    verification: deps.AdminVerification = Depends(deps.get_admin_verification),
):
    """Initial waitlist page props. Empty, never an error, when access is denied."""
    return load_waitlist_page(db, verification)


@router.get("/tickets", response_model=TicketsPageProps)
@limiter.limit(settings.RATE_LIMIT)
def tickets_page_props(
    request: Request,
    db: Session = Depends(get_db),
    verification: deps.AdminVerification = Depends(deps.get_admin_verification),
):
    return load_tickets_page(db, verification)
