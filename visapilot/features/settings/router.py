# System Settings Feature - Router

from fastapi import APIRouter, Depends

from visapilot.features.auth.dependencies import get_current_user, require_role
from visapilot.features.auth.models import User
from visapilot.features.settings.schemas import (
    PublicSettingsResponse,
    SettingsResponse,
    UpdateSettingsRequest,
    UpdateSettingsResponse,
)
from visapilot.features.settings.service import SettingsService


router = APIRouter(prefix="/settings", tags=["Settings"])
public_router = APIRouter(prefix="/public-settings", tags=["Settings"])


@router.get("", response_model=SettingsResponse)
async def get_settings(
    current_user: User = Depends(get_current_user)
):
    """Get the system settings (created with defaults on first access)."""
    system_settings = await SettingsService.get_settings()
    return SettingsService.settings_to_response(system_settings)


@router.put("", response_model=UpdateSettingsResponse)
async def update_settings(
    request: UpdateSettingsRequest,
    current_user: User = Depends(require_role("admin"))
):
    """
    Update system settings. Admins only.
    
    Nested objects (workingHours, address, socialMedia, privacy, security)
    are merged with the stored values.
    """
    system_settings = await SettingsService.update_settings(request)
    return UpdateSettingsResponse(
        message="Settings updated successfully",
        settings=SettingsService.settings_to_response(system_settings),
    )


@public_router.get("", response_model=PublicSettingsResponse)
async def get_public_settings():
    """System title and description for the sign-in screen. No session required."""
    system_settings = await SettingsService.get_settings()
    return PublicSettingsResponse(
        system_title=system_settings.system_title,
        system_description=system_settings.system_description,
    )
