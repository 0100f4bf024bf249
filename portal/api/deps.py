"""
Shared API dependencies - access gateway
"""
import logging
from typing import Optional

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from portal.database import get_db
from portal.schemas.user import Identity
from portal.services.auth_service import UnauthenticatedError, decode_access_token
from portal.services.erp_client import (
    RecordSource,
    RecordSourceError,
    RecordSourceUnavailableError,
    get_record_source
)
from portal.services.user_service import UserService

logger = logging.getLogger(__name__)


def unauthenticated(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"}
    )


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    """Dependency to get UserService instance"""
    return UserService(db)


def get_source() -> RecordSource:
    """Dependency to get the configured ERP record source"""
    return get_record_source()


def get_optional_identity(
    authorization: Optional[str] = Header(None, description="Bearer token"),
    service: UserService = Depends(get_user_service)
) -> Optional[Identity]:
    """
    Resolve the caller from the Authorization header

    The token only vouches for the account id; email and role are read
    from the account store on every request so visibility always follows
    the account's current email.

    Returns None when no header is sent.
    """
    if not authorization:
        return None

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise unauthenticated("Invalid authorization format. Use: Bearer <token>")

    try:
        user_id = decode_access_token(token.strip())
    except UnauthenticatedError as e:
        logger.warning("Rejected token: %s", e)
        raise unauthenticated(str(e))

    identity = service.resolve_identity(user_id)
    if identity is None:
        logger.warning("Token for missing account %s", user_id)
        raise unauthenticated("User not found")
    return identity


def get_current_identity(identity: Optional[Identity] = Depends(get_optional_identity)) -> Identity:
    """Require an authenticated caller"""
    if identity is None:
        raise unauthenticated("User not authenticated")
    return identity


def require_admin(identity: Identity = Depends(get_current_identity)) -> Identity:
    """Require an authenticated ADMIN caller"""
    if not identity.is_admin:
        logger.warning("User %s denied admin access", identity.id)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required"
        )
    return identity


def source_error(e: RecordSourceError) -> HTTPException:
    """Translate an ERP failure into the HTTP error returned to the caller"""
    if isinstance(e, RecordSourceUnavailableError):
        return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))
