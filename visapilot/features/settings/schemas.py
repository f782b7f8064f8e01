# System Settings Feature - Schemas

from typing import Optional, List
from datetime import datetime
from pydantic import Field

from visapilot.features.settings.models import Weekday
from visapilot.shared.schemas import CamelModel


HH_MM = r"^([01]\d|2[0-3]):[0-5]\d$"


# Sub-objects: every field optional so a PUT can change a single key
class WorkingHoursSchema(CamelModel):
    start: Optional[str] = Field(None, pattern=HH_MM)
    end: Optional[str] = Field(None, pattern=HH_MM)
    days: Optional[List[Weekday]] = None


class OfficeAddressSchema(CamelModel):
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    postal_code: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None


class SocialMediaSchema(CamelModel):
    website: Optional[str] = None
    facebook: Optional[str] = None
    twitter: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None


class PrivacySettingsSchema(CamelModel):
    data_retention_days: Optional[int] = Field(None, ge=0)
    allow_data_export: Optional[bool] = None
    allow_data_deletion: Optional[bool] = None
    require_consent: Optional[bool] = None


class SecuritySettingsSchema(CamelModel):
    session_timeout: Optional[int] = Field(None, ge=1)
    max_login_attempts: Optional[int] = Field(None, ge=1)
    password_min_length: Optional[int] = Field(None, ge=1)
    require_two_factor: Optional[bool] = None


class UpdateSettingsRequest(CamelModel):
    """Partial settings update; nested objects are merged key by key."""
    system_title: Optional[str] = None
    system_description: Optional[str] = None
    currency: Optional[str] = None
    timezone: Optional[str] = None
    date_format: Optional[str] = None
    time_format: Optional[str] = Field(None, pattern=r"^(12h|24h)$")
    language: Optional[str] = None
    theme: Optional[str] = Field(None, pattern=r"^(light|dark|auto)$")
    email_notifications: Optional[bool] = None
    sms_notifications: Optional[bool] = None
    appointment_reminders: Optional[bool] = None
    reminder_time: Optional[int] = Field(None, ge=0)
    max_appointments_per_day: Optional[int] = Field(None, ge=1)
    working_hours: Optional[WorkingHoursSchema] = None
    address: Optional[OfficeAddressSchema] = None
    social_media: Optional[SocialMediaSchema] = None
    privacy: Optional[PrivacySettingsSchema] = None
    security: Optional[SecuritySettingsSchema] = None


class SettingsResponse(CamelModel):
    id: str
    system_title: str
    system_description: str
    currency: str
    timezone: str
    date_format: str
    time_format: str
    language: str
    theme: str
    email_notifications: bool
    sms_notifications: bool
    appointment_reminders: bool
    reminder_time: int
    max_appointments_per_day: int
    working_hours: WorkingHoursSchema
    address: OfficeAddressSchema
    social_media: SocialMediaSchema
    privacy: PrivacySettingsSchema
    security: SecuritySettingsSchema
    created_at: datetime
    updated_at: datetime


class UpdateSettingsResponse(CamelModel):
    message: str
    settings: SettingsResponse


class PublicSettingsResponse(CamelModel):
    """Branding shown before sign-in."""
    system_title: str
    system_description: str
