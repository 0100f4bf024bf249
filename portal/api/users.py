"""
User API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, status

from portal.api.deps import get_current_identity, get_user_service, require_admin
from portal.config import settings
from portal.schemas.user import (
    Identity,
    ProfileUpdate,
    PasswordChange,
    UserCreate,
    ProfileResponse,
    UserCreatedResponse,
    UserListResponse,
    MessageResponse
)
from portal.services.auth_service import InvalidCredentialsError, EmailAlreadyRegisteredError
from portal.services.user_service import UserService, UserNotFoundError

router = APIRouter(prefix="/user", tags=["user"])


@router.get("/profile", response_model=ProfileResponse, summary="Get own profile")
def get_profile(
    identity: Identity = Depends(get_current_identity),
    service: UserService = Depends(get_user_service)
):
    """Retrieve the caller's profile"""
    profile = service.get_profile(identity.id)
    if not profile:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return ProfileResponse(profile=profile)


@router.put("/profile", response_model=ProfileResponse, summary="Update own profile")
def update_profile(
    data: ProfileUpdate,
    identity: Identity = Depends(get_current_identity),
    service: UserService = Depends(get_user_service)
):
    """
    Update the caller's profile

    Only provided fields are changed.

    - **name**, **phone**, **company**
    """
    profile = service.update_profile(identity.id, data)
    if not profile:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return ProfileResponse(profile=profile)


@router.put("/password", response_model=MessageResponse, summary="Change own password")
def change_password(
    data: PasswordChange,
    identity: Identity = Depends(get_current_identity),
    service: UserService = Depends(get_user_service)
):
    """
    Change the caller's password

    - **currentPassword**: Current password (required)
    - **newPassword**: New password (required, at least 6 characters)
    """
    try:
        service.change_password(identity.id, data.current_password, data.new_password)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except (InvalidCredentialsError, ValueError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return MessageResponse(message="Password changed successfully")


# Admin only endpoints

@router.get("/all", response_model=UserListResponse, summary="List accounts")
def get_all_users(
    admin: Identity = Depends(require_admin),
    service: UserService = Depends(get_user_service)
):
    """Retrieve every account, newest first (admin only)"""
    return UserListResponse(users=service.list_users())


@router.post("/create", response_model=UserCreatedResponse, status_code=status.HTTP_201_CREATED, summary="Create account")
def create_user(
    data: UserCreate,
    admin: Identity = Depends(require_admin),
    service: UserService = Depends(get_user_service)
):
    """
    Create a USER account with the default password (admin only)

    - **email**: Account email (required, unique)
    - **name**, **company**: Optional profile fields
    """
    try:
        user = service.create_user(data)
    except EmailAlreadyRegisteredError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return UserCreatedResponse(
        user=user,
        message=f"User created successfully. Default password is {settings.DEFAULT_USER_PASSWORD}"
    )


@router.delete("/{user_id}", response_model=MessageResponse, summary="Delete account")
def delete_user(
    user_id: int,
    admin: Identity = Depends(require_admin),
    service: UserService = Depends(get_user_service)
):
    """
    Delete an account (admin only)

    - **user_id**: Account ID; admins cannot delete themselves
    """
    try:
        service.delete_user(user_id, acting_user_id=admin.id)
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return MessageResponse(message="User deleted successfully")
