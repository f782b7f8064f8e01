# Appointments Feature - Schemas

from typing import Optional, List
from datetime import date, datetime
from pydantic import EmailStr, Field

from visapilot.features.appointments.models import AppointmentStatus, AppointmentType
from visapilot.shared.schemas import CamelModel, PageInfo, PartialUpdateModel


TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class CreateAppointmentRequest(CamelModel):
    """Request schema for booking an appointment.
    
    Contact fields may be omitted when ``client_id`` points at an
    existing client; they are then copied from that client.
    """
    client_id: Optional[str] = None
    client_name: Optional[str] = Field(None, min_length=1)
    client_email: Optional[EmailStr] = None
    client_phone: Optional[str] = Field(None, min_length=1)
    consultant_name: str = Field(..., min_length=1)
    consultant_email: Optional[EmailStr] = None
    appointment_date: date
    appointment_time: str = Field(..., pattern=TIME_PATTERN)
    appointment_type: AppointmentType = "visa-consultation"
    status: AppointmentStatus = "scheduled"
    reason: Optional[str] = None
    notes: Optional[str] = None
    requirements: List[str] = Field(default_factory=list)
    consultation_notes: Optional[str] = None
    recommendations: Optional[str] = None


class UpdateAppointmentRequest(PartialUpdateModel):
    """Request schema for updating or rescheduling an appointment."""
    # A null clientId detaches the appointment from its client
    nullable_fields = frozenset({
        "client_id", "consultant_email", "reason", "notes", "consultation_notes", "recommendations",
    })
    
    client_id: Optional[str] = None
    client_name: Optional[str] = Field(None, min_length=1)
    client_email: Optional[EmailStr] = None
    client_phone: Optional[str] = Field(None, min_length=1)
    consultant_name: Optional[str] = Field(None, min_length=1)
    consultant_email: Optional[EmailStr] = None
    appointment_date: Optional[date] = None
    appointment_time: Optional[str] = Field(None, pattern=TIME_PATTERN)
    appointment_type: Optional[AppointmentType] = None
    status: Optional[AppointmentStatus] = None
    reason: Optional[str] = None
    notes: Optional[str] = None
    requirements: Optional[List[str]] = None
    consultation_notes: Optional[str] = None
    recommendations: Optional[str] = None


class ClientSummary(CamelModel):
    """The referenced client, looked up when the appointment is read."""
    id: str
    client_id: str
    name: str
    email: str
    phone: str


class AppointmentResponse(CamelModel):
    """Response schema for appointment data."""
    id: str
    client_id: Optional[str] = None
    client: Optional[ClientSummary] = None
    client_name: str
    client_email: str
    client_phone: str
    consultant_name: str
    consultant_email: Optional[str] = None
    appointment_date: date
    appointment_time: str
    appointment_type: str
    status: str
    reason: Optional[str] = None
    notes: Optional[str] = None
    requirements: List[str] = []
    consultation_notes: Optional[str] = None
    recommendations: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class AppointmentListResponse(PageInfo):
    """Response schema for a page of appointments."""
    appointments: List[AppointmentResponse]
