# Notifications Feature - Schemas

from typing import Optional, List
from datetime import datetime
from pydantic import Field, field_validator

from visapilot.features.appointments.schemas import ClientSummary
from visapilot.features.notifications.models import (
    NotificationStatus,
    NotificationType,
    Priority,
    SendTime,
    TemplateChannel,
)
from visapilot.shared.schemas import CamelModel, PageInfo


# ============== Templates ==============

class CreateTemplateRequest(CamelModel):
    name: str = Field(..., max_length=200)
    type: TemplateChannel
    category: str = "general"
    subject: str = ""
    content: str
    variables: List[str] = Field(default_factory=list)
    
    @field_validator("name", "content")
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Field is required")
        return v
    
    @field_validator("variables")
    @classmethod
    def clean_variables(cls, v: List[str]) -> List[str]:
        return [name.strip() for name in v if name.strip()]


class TemplateResponse(CamelModel):
    id: str
    name: str
    type: str
    category: str
    subject: str
    content: str
    variables: List[str] = []
    created_at: datetime
    updated_at: datetime


class TemplateListResponse(PageInfo):
    templates: List[TemplateResponse]


# ============== Notifications ==============

class RecipientSchema(CamelModel):
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    contact: str = Field(..., min_length=1)


class CreateNotificationRequest(CamelModel):
    """Request schema for sending a notification."""
    type: NotificationType
    subject: str = ""
    content: str
    recipients: List[RecipientSchema] = Field(default_factory=list)
    priority: Priority = "medium"
    send_time: SendTime = "immediate"
    client_id: Optional[str] = None
    
    @field_validator("content")
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Field is required")
        return v


class NotificationResponse(CamelModel):
    id: str
    type: str
    status: NotificationStatus
    subject: str
    content: str
    recipients: List[RecipientSchema] = []
    priority: str
    send_time: str
    client_id: Optional[str] = None
    client: Optional[ClientSummary] = None
    sent_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class NotificationListResponse(PageInfo):
    notifications: List[NotificationResponse]
