# System Settings Feature - Models

from typing import List, Literal
from beanie import Document
from pydantic import BaseModel, Field
from visapilot.shared.models import TimestampMixin


DEFAULT_SYSTEM_TITLE = "VisaPilot - Visa & Travel Agency / Student Consultancy"
DEFAULT_SYSTEM_DESCRIPTION = "Operations & CRM Platform"

Weekday = Literal["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]


class WorkingHours(BaseModel):
    start: str = "09:00"
    end: str = "17:00"
    days: List[Weekday] = Field(
        default_factory=lambda: ["monday", "tuesday", "wednesday", "thursday", "friday"]
    )


class OfficeAddress(BaseModel):
    street: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    postal_code: str = ""
    phone: str = ""
    email: str = ""


class SocialMedia(BaseModel):
    website: str = ""
    facebook: str = ""
    twitter: str = ""
    linkedin: str = ""
    instagram: str = ""


class PrivacySettings(BaseModel):
    data_retention_days: int = 2555  # 7 years
    allow_data_export: bool = True
    allow_data_deletion: bool = True
    require_consent: bool = True


class SecuritySettings(BaseModel):
    session_timeout: int = 480  # minutes
    max_login_attempts: int = 5
    password_min_length: int = 8
    require_two_factor: bool = False


class SystemSettings(Document, TimestampMixin):
    """
    System-wide preferences.
    
    Only one document is kept; it is created with these defaults on first read.
    """
    
    system_title: str = DEFAULT_SYSTEM_TITLE
    system_description: str = DEFAULT_SYSTEM_DESCRIPTION
    currency: str = "USD"
    timezone: str = "UTC"
    date_format: str = "MM/DD/YYYY"
    time_format: Literal["12h", "24h"] = "12h"
    language: str = "en"
    theme: Literal["light", "dark", "auto"] = "light"
    
    email_notifications: bool = True
    sms_notifications: bool = False
    appointment_reminders: bool = True
    reminder_time: int = 30  # minutes before the appointment
    max_appointments_per_day: int = 50
    
    working_hours: WorkingHours = Field(default_factory=WorkingHours)
    address: OfficeAddress = Field(default_factory=OfficeAddress)
    social_media: SocialMedia = Field(default_factory=SocialMedia)
    privacy: PrivacySettings = Field(default_factory=PrivacySettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)
    
    class Settings:
        name = "settings"
        use_state_management = True
