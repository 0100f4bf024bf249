"""
Pydantic schemas for accounts and caller identity
"""
from pydantic import BaseModel, Field, ConfigDict, AfterValidator
from pydantic.networks import validate_email
from pydantic.alias_generators import to_camel
from typing import Optional, Annotated
from datetime import datetime

from portal.config import settings
from portal.models.user import Role


def _check_email(value: str) -> str:
    """Validate the address but keep it exactly as typed"""
    validate_email(value)
    return value


# Stored verbatim: orders are matched on the exact email string
AccountEmail = Annotated[str, AfterValidator(_check_email)]


class Identity(BaseModel):
    """Resolved caller context, built once per request"""
    id: int
    email: str
    role: Role
    
    model_config = ConfigDict(frozen=True)
    
    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


class UserProfile(BaseModel):
    """Schema for profile response"""
    id: int
    email: str
    name: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    role: Role
    created_at: datetime
    
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class ProfileUpdate(BaseModel):
    """Schema for updating own profile (all fields optional)"""
    name: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)
    company: Optional[str] = Field(None, max_length=255)


class PasswordChange(BaseModel):
    """Schema for changing own password"""
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=settings.MIN_PASSWORD_LENGTH, max_length=72)
    
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserCreate(BaseModel):
    """Schema for creating an account (admin only)"""
    email: AccountEmail
    name: Optional[str] = Field(None, max_length=255)
    company: Optional[str] = Field(None, max_length=255)


class ProfileResponse(BaseModel):
    """Schema for single profile response"""
    profile: UserProfile


class UserCreatedResponse(BaseModel):
    """Schema for account creation response"""
    user: UserProfile
    message: str


class UserListResponse(BaseModel):
    """Schema for list of accounts response"""
    users: list[UserProfile]


class MessageResponse(BaseModel):
    """Schema for plain message response"""
    message: str
