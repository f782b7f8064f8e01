# Appointments Feature - Models

from typing import Optional, List, Literal
from datetime import datetime
from beanie import Document, Indexed, PydanticObjectId
from pydantic import Field
from visapilot.shared.models import TimestampMixin


AppointmentType = Literal[
    "visa-consultation",
    "document-review",
    "interview-preparation",
    "application-submission",
    "status-update",
    "follow-up",
    "compliance-check",
    "case-review",
]

AppointmentStatus = Literal["scheduled", "confirmed", "in-progress", "completed", "cancelled"]


class Appointment(Document, TimestampMixin):
    """A consultation booked for a client with a consultant."""
    
    # Reference to clients._id; contact fields below are a snapshot
    client_ref: Optional[PydanticObjectId] = None
    client_name: str
    client_email: str
    client_phone: str
    
    consultant_name: str
    consultant_email: Optional[str] = None
    
    # Midnight of the appointment day; the slot is in appointment_time
    appointment_date: Indexed(datetime)
    appointment_time: str  # HH:MM
    appointment_type: AppointmentType = "visa-consultation"
    status: AppointmentStatus = "scheduled"
    
    reason: Optional[str] = None
    notes: Optional[str] = None
    requirements: List[str] = Field(default_factory=list)
    consultation_notes: Optional[str] = None
    recommendations: Optional[str] = None
    
    class Settings:
        name = "appointments"
        use_state_management = True
