# Profile Feature - Router

from fastapi import APIRouter, Depends

from visapilot.features.auth.dependencies import get_current_user
from visapilot.features.auth.models import User
from visapilot.features.auth.schemas import UserResponse
from visapilot.features.auth.service import AuthService
from visapilot.features.profile.schemas import (
    ChangePasswordRequest,
    ProfileUpdateResponse,
    UpdateProfileRequest,
)
from visapilot.features.profile.service import ProfileService
from visapilot.shared.schemas import MessageResponse


router = APIRouter(prefix="/profile", tags=["Profile"])


@router.get("", response_model=UserResponse)
async def get_profile(current_user: User = Depends(get_current_user)):
    """Get the signed-in user's profile."""
    return AuthService.user_to_response(current_user)


@router.put("", response_model=ProfileUpdateResponse)
async def update_profile(
    request: UpdateProfileRequest,
    current_user: User = Depends(get_current_user)
):
    """Update name, email and phone. The email must not belong to another user."""
    user = await ProfileService.update_profile(current_user, request)
    return ProfileUpdateResponse(
        message="Profile updated successfully",
        user=AuthService.user_to_response(user),
    )


@router.put("/password", response_model=MessageResponse)
async def change_password(
    request: ChangePasswordRequest,
    current_user: User = Depends(get_current_user)
):
    await ProfileService.change_password(current_user, request)
    return MessageResponse(message="Password updated successfully")
