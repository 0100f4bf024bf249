"""
Auth Service - password hashing, token issuance and login/registration
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt
from sqlalchemy.orm import Session

from portal.config import settings
from portal.models.user import Role
from portal.repositories.user_repository import UserRepository
from portal.schemas.auth import LoginRequest, RegisterRequest, AuthUser, AuthResponse

logger = logging.getLogger(__name__)


class AuthError(Exception):
    """Base exception for authentication errors"""
    pass


class UnauthenticatedError(AuthError):
    """No valid caller identity for the request"""
    pass


class InvalidCredentialsError(AuthError):
    """Email/password pair does not match an account"""
    pass


class EmailAlreadyRegisteredError(ValueError):
    """An account with this email already exists"""
    pass


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt()).decode('utf-8')


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode('utf-8'), password_hash.encode('utf-8'))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def create_access_token(user_id: int, email: str, role: str, expires_minutes: Optional[int] = None) -> str:
    """Issue a signed JWT for an account"""
    expires = datetime.now(timezone.utc) + timedelta(minutes=expires_minutes or settings.JWT_EXPIRES_MINUTES)
    payload = {
        "sub": str(user_id),
        "id": user_id,
        "email": email,
        "role": role,
        "exp": expires
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> int:
    """
    Validate a JWT and return the account id it was issued for

    Raises:
        UnauthenticatedError: If the token is expired, tampered with or incomplete
    """
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except jwt.ExpiredSignatureError as e:
        raise UnauthenticatedError("Token expired") from e
    except jwt.InvalidTokenError as e:
        raise UnauthenticatedError("Invalid token") from e

    user_id = payload.get("id")
    if not isinstance(user_id, int):
        raise UnauthenticatedError("Token has no account id")
    return user_id


class AuthService:
    """Service layer for login and self-registration"""

    def __init__(self, db: Session):
        self.repository = UserRepository(db)

    def _respond(self, user) -> AuthResponse:
        token = create_access_token(user.id, user.email, user.role)
        return AuthResponse(user=AuthUser.model_validate(user), token=token)

    def login(self, credentials: LoginRequest) -> AuthResponse:
        """
        Verify credentials and issue a token

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        user = self.repository.get_by_email(credentials.email)
        if not user or not verify_password(credentials.password, user.password):
            logger.warning("Failed login for %s", credentials.email)
            raise InvalidCredentialsError("Invalid email or password")

        logger.info("User %s logged in", user.id)
        return self._respond(user)

    def register(self, data: RegisterRequest) -> AuthResponse:
        """
        Create a USER account and issue a token

        Raises:
            EmailAlreadyRegisteredError: If the email is taken
        """
        if self.repository.get_by_email(data.email):
            raise EmailAlreadyRegisteredError("Email already registered")

        user = self.repository.create({
            'email': data.email,
            'password': hash_password(data.password),
            'name': data.name,
            'phone': data.phone,
            'company': data.company,
            'role': Role.USER.value
        })
        logger.info("Registered user %s (%s)", user.id, user.email)
        return self._respond(user)
