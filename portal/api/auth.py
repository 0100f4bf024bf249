"""
Auth API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from portal.database import get_db
from portal.schemas.auth import LoginRequest, RegisterRequest, AuthResponse
from portal.services.auth_service import AuthService, InvalidCredentialsError, EmailAlreadyRegisteredError

router = APIRouter(prefix="/auth", tags=["auth"])


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    """Dependency to get AuthService instance"""
    return AuthService(db)


@router.post("/login", response_model=AuthResponse, summary="Log in")
def login(
    credentials: LoginRequest,
    service: AuthService = Depends(get_auth_service)
):
    """
    Exchange email and password for a bearer token

    - **email**: Account email (required)
    - **password**: Account password (required)
    """
    try:
        return service.login(credentials)
    except InvalidCredentialsError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e)
        )


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED, summary="Register")
def register(
    data: RegisterRequest,
    service: AuthService = Depends(get_auth_service)
):
    """
    Create a USER account and return a bearer token

    - **email**: Account email (required, unique)
    - **password**: Account password (required)
    - **name**, **phone**, **company**: Optional profile fields
    """
    try:
        return service.register(data)
    except EmailAlreadyRegisteredError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
