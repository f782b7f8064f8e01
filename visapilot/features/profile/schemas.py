# Profile Feature - Schemas

from typing import Optional

from visapilot.features.auth.schemas import UserResponse
from visapilot.shared.schemas import CamelModel


class UpdateProfileRequest(CamelModel):
    # Presence is checked by the service so the caller gets one clear message
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class ChangePasswordRequest(CamelModel):
    current_password: Optional[str] = None
    new_password: Optional[str] = None


class ProfileUpdateResponse(CamelModel):
    message: str
    user: UserResponse
