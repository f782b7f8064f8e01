# Dashboard Feature - Schemas

from typing import List, Literal
from datetime import datetime

from visapilot.shared.schemas import CamelModel


# ============== Dashboard Statistics ==============

class StatItem(CamelModel):
    """A single dashboard statistic."""
    name: str
    value: str
    change: str
    change_type: Literal["positive", "negative"]


# ============== Activity ==============

class ActivityItem(CamelModel):
    """One entry of the merged activity stream."""
    id: str
    type: Literal["appointment", "client", "patient"]
    title: str
    description: str
    time: str
    created_at: datetime
    status: str
    
    class Config:
        json_schema_extra = {
            "example": {
                "id": "client-665f1c2e9b1d4a0012345678",
                "type": "client",
                "title": "New client registered",
                "description": "Sarah Johnson",
                "time": "2 hours ago",
                "createdAt": "2024-06-04T10:15:00",
                "status": "completed",
            }
        }


class UpcomingAppointment(CamelModel):
    id: str
    client: str
    time: str
    type: str
    status: Literal["confirmed", "pending"]


class DashboardResponse(CamelModel):
    stats: List[StatItem]
    recent_activities: List[ActivityItem]
    upcoming_appointments: List[UpcomingAppointment]


class ActivityFeedResponse(CamelModel):
    activities: List[ActivityItem]
    total: int
    limit: int
    skip: int
