"""
User Service - profile and account management
"""
import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from portal.config import settings
from portal.models.user import Role
from portal.repositories.user_repository import UserRepository
from portal.schemas.user import Identity, UserProfile, ProfileUpdate, UserCreate
from portal.services.auth_service import (
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    hash_password,
    verify_password
)

logger = logging.getLogger(__name__)


class UserNotFoundError(LookupError):
    """No account with the given id"""
    pass


class UserService:
    """Service layer for account business logic"""

    def __init__(self, db: Session):
        self.repository = UserRepository(db)

    def resolve_identity(self, user_id: int) -> Optional[Identity]:
        """Build the caller identity from the account's current row"""
        user = self.repository.get_by_id(user_id)
        if not user:
            return None
        return Identity(id=user.id, email=user.email, role=user.role)

    def get_profile(self, user_id: int) -> Optional[UserProfile]:
        """Get profile by user ID"""
        user = self.repository.get_by_id(user_id)
        if not user:
            return None
        return UserProfile.model_validate(user)

    def update_profile(self, user_id: int, data: ProfileUpdate) -> Optional[UserProfile]:
        """Update name, phone and company; only provided fields change"""
        user = self.repository.update(user_id, data.model_dump(exclude_unset=True))
        if not user:
            return None
        return UserProfile.model_validate(user)

    def change_password(self, user_id: int, current_password: str, new_password: str) -> None:
        """
        Change own password

        Raises:
            UserNotFoundError: If the account no longer exists
            InvalidCredentialsError: If the current password is wrong
            ValueError: If the new password is too short
        """
        user = self.repository.get_by_id(user_id)
        if not user:
            raise UserNotFoundError("User not found")

        if not verify_password(current_password, user.password):
            raise InvalidCredentialsError("Current password is incorrect")

        if len(new_password) < settings.MIN_PASSWORD_LENGTH:
            raise ValueError(f"New password must be at least {settings.MIN_PASSWORD_LENGTH} characters")

        self.repository.update(user_id, {'password': hash_password(new_password)})
        logger.info("User %s changed password", user_id)

    def create_user(self, data: UserCreate) -> UserProfile:
        """
        Create a USER account with the default password (admin only)

        Raises:
            EmailAlreadyRegisteredError: If the email is taken
        """
        if self.repository.get_by_email(data.email):
            raise EmailAlreadyRegisteredError("Email already registered")

        user = self.repository.create({
            'email': data.email,
            'password': hash_password(settings.DEFAULT_USER_PASSWORD),
            'name': data.name,
            'company': data.company,
            'role': Role.USER.value
        })
        logger.info("Created user %s (%s)", user.id, user.email)
        return UserProfile.model_validate(user)

    def list_users(self) -> List[UserProfile]:
        """Get all accounts, newest first"""
        return [UserProfile.model_validate(u) for u in self.repository.get_all()]

    def delete_user(self, user_id: int, acting_user_id: int) -> None:
        """
        Delete an account (admin only)

        Raises:
            ValueError: If an admin tries to delete their own account
            UserNotFoundError: If the account does not exist
        """
        if user_id == acting_user_id:
            raise ValueError("Cannot delete your own account")

        if not self.repository.delete(user_id):
            raise UserNotFoundError(f"User with id={user_id} not found")
        logger.info("User %s deleted user %s", acting_user_id, user_id)
