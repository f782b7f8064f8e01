# Notifications Feature - Router

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from visapilot.config import settings
from visapilot.features.auth.dependencies import get_current_user
from visapilot.features.auth.models import User
from visapilot.features.notifications.models import NotificationStatus, NotificationType, TemplateChannel
from visapilot.features.notifications.schemas import (
    CreateNotificationRequest,
    CreateTemplateRequest,
    NotificationListResponse,
    NotificationResponse,
    TemplateListResponse,
    TemplateResponse,
)
from visapilot.features.notifications.service import NotificationService
from visapilot.shared.schemas import page_fields


router = APIRouter(prefix="/notifications", tags=["Notifications"])
templates_router = APIRouter(prefix="/notification-templates", tags=["Notifications"])


@router.get("", response_model=NotificationListResponse)
async def list_notifications(
    type_filter: Optional[NotificationType] = Query(None, alias="type"),
    status_filter: Optional[NotificationStatus] = Query(None, alias="status"),
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1),
    current_user: User = Depends(get_current_user)
):
    """
    List sent and queued notifications, newest first.
    
    - **type**: email, sms, both or alert
    - **status**: pending, sent, delivered, failed or active
    """
    limit = settings.clamp_limit(limit)
    notifications, total = await NotificationService.list_notifications(
        type_filter, status_filter, (page - 1) * limit, limit
    )
    clients = await NotificationService.load_clients(notifications)
    
    return NotificationListResponse(
        notifications=[NotificationService.notification_to_response(n, clients) for n in notifications],
        **page_fields(total, page, limit),
    )


@router.post("", response_model=NotificationResponse, status_code=status.HTTP_201_CREATED)
async def create_notification(
    request: CreateNotificationRequest,
    current_user: User = Depends(get_current_user)
):
    """Send a notification now, or queue it when scheduled."""
    notification = await NotificationService.create_notification(request)
    clients = await NotificationService.load_clients([notification])
    return NotificationService.notification_to_response(notification, clients)


@templates_router.get("", response_model=TemplateListResponse)
async def list_templates(
    channel: Optional[TemplateChannel] = Query(None, alias="type"),
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1),
    current_user: User = Depends(get_current_user)
):
    """List notification templates, newest first."""
    limit = settings.clamp_limit(limit)
    templates, total = await NotificationService.list_templates(channel, (page - 1) * limit, limit)
    return TemplateListResponse(
        templates=[NotificationService.template_to_response(t) for t in templates],
        **page_fields(total, page, limit),
    )


@templates_router.post("", response_model=TemplateResponse, status_code=status.HTTP_201_CREATED)
async def create_template(
    request: CreateTemplateRequest,
    current_user: User = Depends(get_current_user)
):
    """Create a template; names are unique."""
    template = await NotificationService.create_template(request)
    return NotificationService.template_to_response(template)
