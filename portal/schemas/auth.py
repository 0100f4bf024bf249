"""
Pydantic schemas for login and registration
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional

from portal.models.user import Role
from portal.schemas.user import AccountEmail


class LoginRequest(BaseModel):
    """Schema for login"""
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class RegisterRequest(BaseModel):
    """Schema for self-registration"""
    email: AccountEmail
    password: str = Field(..., min_length=1, max_length=72)
    name: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)
    company: Optional[str] = Field(None, max_length=255)


class AuthUser(BaseModel):
    """Account summary returned alongside a token"""
    id: int
    email: str
    name: Optional[str] = None
    role: Role
    
    model_config = ConfigDict(from_attributes=True)


class AuthResponse(BaseModel):
    """Schema for login/register response"""
    user: AuthUser
    token: str
