# Notifications Feature - Service

from datetime import datetime
from typing import Dict, List, Optional, Tuple

from visapilot.core.email import send_email
from visapilot.core.logging import logger
from visapilot.features.appointments.schemas import ClientSummary
from visapilot.features.clients.models import Client
from visapilot.features.notifications.models import Notification, NotificationTemplate, Recipient
from visapilot.features.notifications.schemas import (
    CreateNotificationRequest,
    CreateTemplateRequest,
    NotificationResponse,
    TemplateResponse,
)
from visapilot.shared.exceptions import ConflictException, NotFoundException
from visapilot.shared.models import parse_object_id


EMAIL_TYPES = ("email", "both")


class NotificationService:
    """Service class for notification templates and sent notifications."""
    
    # ============== Templates ==============
    
    @staticmethod
    async def create_template(request: CreateTemplateRequest) -> NotificationTemplate:
        existing = await NotificationTemplate.find_one(NotificationTemplate.name == request.name)
        if existing:
            raise ConflictException("Template name already exists")
    
        template = NotificationTemplate(**request.model_dump())
        await template.insert()
        logger.info(f"Created {template.type} notification template '{template.name}'")
        return template
    
    @staticmethod
    async def list_templates(
        channel: Optional[str],
        skip: int,
        limit: int,
    ) -> Tuple[List[NotificationTemplate], int]:
        conditions = []
        if channel:
            conditions.append(NotificationTemplate.type == channel)
    
        query = NotificationTemplate.find(*conditions)
        total = await query.count()
        templates = await query.sort([("created_at", -1), ("_id", -1)]).skip(skip).limit(limit).to_list()
        return templates, total
    
    @staticmethod
    def template_to_response(template: NotificationTemplate) -> TemplateResponse:
        return TemplateResponse(id=str(template.id), **template.model_dump(exclude={"id", "revision_id"}))
    
    # ============== Notifications ==============
    
    @staticmethod
    async def dispatch(notification: Notification) -> None:
        """
        Deliver an immediate notification and record the outcome.
    
        Email goes out over SMTP. Alerts are in-app only and become active
        straight away. SMS and scheduled sends stay pending.
        """
        if notification.send_time == "scheduled":
            return
    
        if notification.type == "alert":
            notification.status = "active"
            notification.sent_at = datetime.utcnow()
            return
    
        if notification.type not in EMAIL_TYPES:
            return
    
        addresses = [r.contact for r in notification.recipients if "@" in r.contact]
        if not addresses:
            logger.warning(f"Notification {notification.id} has no email recipients")
            notification.status = "failed"
            return
    
        sent = await send_email(addresses, notification.subject or "Notification", notification.content)
        notification.status = "sent" if sent else "failed"
        if sent:
            notification.sent_at = datetime.utcnow()
    
    @staticmethod
    async def create_notification(request: CreateNotificationRequest) -> Notification:
        """Record a notification, then deliver it when it is due now."""
        client_ref = None
        if request.client_id:
            client = await Client.get(parse_object_id(request.client_id, "Client not found"))
            if not client:
                raise NotFoundException("Client not found")
            client_ref = client.id
    
        notification = Notification(
            type=request.type,
            subject=request.subject,
            content=request.content,
            recipients=[Recipient(**r.model_dump()) for r in request.recipients],
            priority=request.priority,
            send_time=request.send_time,
            client_ref=client_ref,
        )
        await notification.insert()
    
        await NotificationService.dispatch(notification)
        notification.update_timestamp()
        await notification.save()
    
        logger.info(
            f"Notification {notification.id} ({notification.type}) to "
            f"{len(notification.recipients)} recipient(s): {notification.status}"
        )
        return notification
    
    @staticmethod
    async def list_notifications(
        notification_type: Optional[str],
        status: Optional[str],
        skip: int,
        limit: int,
    ) -> Tuple[List[Notification], int]:
        conditions = []
        if notification_type:
            conditions.append(Notification.type == notification_type)
        if status:
            conditions.append(Notification.status == status)
    
        query = Notification.find(*conditions)
        total = await query.count()
        notifications = await query.sort([("created_at", -1), ("_id", -1)]).skip(skip).limit(limit).to_list()
        return notifications, total
    
    @staticmethod
    async def load_clients(notifications: List[Notification]) -> Dict[str, Client]:
        refs = list({n.client_ref for n in notifications if n.client_ref})
        if not refs:
            return {}
        clients = await Client.find({"_id": {"$in": refs}}).to_list()
        return {str(c.id): c for c in clients}
    
    @staticmethod
    def notification_to_response(notification: Notification, clients: Dict[str, Client]) -> NotificationResponse:
        client_id = str(notification.client_ref) if notification.client_ref else None
        client = clients.get(client_id) if client_id else None
    
        data = notification.model_dump(exclude={"id", "revision_id", "client_ref"})
        return NotificationResponse(
            id=str(notification.id),
            client_id=client_id,
            client=ClientSummary(
                id=str(client.id),
                client_id=client.client_id,
                name=client.full_name,
                email=client.email,
                phone=client.phone,
            ) if client else None,
            **data,
        )
