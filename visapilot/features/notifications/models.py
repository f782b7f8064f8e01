# Notifications Feature - Models

from typing import Optional, List, Literal
from datetime import datetime
from beanie import Document, Indexed, PydanticObjectId
from pydantic import BaseModel, Field
from visapilot.shared.models import TimestampMixin


TemplateChannel = Literal["email", "sms"]
NotificationType = Literal["email", "sms", "both", "alert"]
NotificationStatus = Literal["pending", "sent", "delivered", "failed", "active"]
Priority = Literal["low", "medium", "high"]
SendTime = Literal["immediate", "scheduled"]


class NotificationTemplate(Document, TimestampMixin):
    """Reusable message body for email or SMS."""
    
    name: Indexed(str, unique=True)
    type: TemplateChannel
    category: str = "general"
    subject: str = ""
    content: str
    # Placeholder names used inside content, e.g. clientName
    variables: List[str] = Field(default_factory=list)
    
    class Settings:
        name = "notification_templates"
        use_state_management = True


class Recipient(BaseModel):
    id: str
    name: str
    contact: str  # email address or phone number


class Notification(Document, TimestampMixin):
    """A message sent (or queued) to one or more recipients."""
    
    type: NotificationType
    status: NotificationStatus = "pending"
    subject: str = ""
    content: str
    recipients: List[Recipient] = Field(default_factory=list)
    priority: Priority = "medium"
    send_time: SendTime = "immediate"
    client_ref: Optional[PydanticObjectId] = None
    sent_at: Optional[datetime] = None
    
    class Settings:
        name = "notifications"
        use_state_management = True
