# admin_dashboard/api/deps.py
import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from admin_dashboard.core.config import settings
from admin_dashboard.core.errors import UnauthorizedError
from admin_dashboard.crud import crud_role
from admin_dashboard.db.session import get_db
from admin_dashboard.schemas.token import TokenPayload

logger = logging.getLogger(__name__)

# The tokenUrl is only used by the OpenAPI docs.
oauth2_scheme_optional = OAuth2PasswordBearer(tokenUrl="token", auto_error=False)


@dataclass
class AdminVerification:
    """Outcome of the admin check. ``error`` is for logs, not for clients."""
    authorized: bool
    email: Optional[str] = None
    error: Optional[str] = None


def decode_token(token: str) -> TokenPayload:
    payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    return TokenPayload(**payload)


def verify_admin(db: Session, token: Optional[str]) -> AdminVerification:
    """
    Checks that the bearer token belongs to a user whose roles include the
    admin role. Never raises.
    """
    if not token:
        return AdminVerification(authorized=False, error="Not authenticated")

    if not settings.JWT_SECRET:
        logger.critical("JWT_SECRET is not configured; rejecting all admin requests")
        return AdminVerification(authorized=False, error="Not authenticated")

    try:
        token_data = decode_token(token)
    except (JWTError, ValidationError):
        return AdminVerification(authorized=False, error="Not authenticated")

    if not token_data.email:
        return AdminVerification(authorized=False, error="Not authenticated")

    try:
        record = crud_role.role.get_by_email(db, email=token_data.email)
    except SQLAlchemyError:
        logger.exception(f"Role lookup failed for {token_data.email}")
        return AdminVerification(authorized=False, email=token_data.email, error="Not authorized")

    if record is None or not record.has_role(settings.ADMIN_ROLE):
        return AdminVerification(authorized=False, email=token_data.email, error="Not authorized")

    return AdminVerification(authorized=True, email=token_data.email)


def get_admin_verification(
    db: Session = Depends(get_db),
    token: Optional[str] = Depends(oauth2_scheme_optional),
) -> AdminVerification:
    """Non-raising variant for page loaders that fall back to empty props."""
    return verify_admin(db, token)


def require_admin(
    verification: AdminVerification = Depends(get_admin_verification),
) -> AdminVerification:
    if not verification.authorized:
        raise UnauthorizedError(
            context={"reason": verification.error, "email": verification.email}
        )
    return verification
