# System Settings Feature - Service

from pydantic import BaseModel

from visapilot.core.logging import logger
from visapilot.features.settings.models import SystemSettings
from visapilot.features.settings.schemas import SettingsResponse, UpdateSettingsRequest


class SettingsService:
    """Service class for the single system settings document."""
    
    @staticmethod
    async def get_settings() -> SystemSettings:
        """Return the settings document, creating it with defaults when absent."""
        system_settings = await SystemSettings.find_one()
        if system_settings is None:
            system_settings = SystemSettings()
            await system_settings.insert()
            logger.info("Created default system settings")
        return system_settings
    
    @staticmethod
    async def update_settings(request: UpdateSettingsRequest) -> SystemSettings:
        """Apply provided fields; nested objects keep the keys not supplied."""
        system_settings = await SettingsService.get_settings()
        
        updates = request.model_dump(exclude_unset=True)
        for field, value in updates.items():
            if value is None:
                continue
            current = getattr(system_settings, field)
            if isinstance(current, BaseModel) and isinstance(value, dict):
                provided = {k: v for k, v in value.items() if v is not None}
                value = current.model_copy(update=provided)
            setattr(system_settings, field, value)
        
        system_settings.update_timestamp()
        await system_settings.save()
        
        logger.info(f"Updated system settings: {', '.join(sorted(updates))}")
        return system_settings
    
    @staticmethod
    def settings_to_response(system_settings: SystemSettings) -> SettingsResponse:
        return SettingsResponse(
            id=str(system_settings.id),
            **system_settings.model_dump(exclude={"id", "revision_id"}),
        )
