# Appointments Feature - Router

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from visapilot.config import settings
from visapilot.features.appointments.schemas import (
    AppointmentListResponse,
    AppointmentResponse,
    CreateAppointmentRequest,
    UpdateAppointmentRequest,
)
from visapilot.features.appointments.service import AppointmentService
from visapilot.features.auth.dependencies import get_current_user
from visapilot.features.auth.models import User
from visapilot.shared.schemas import MessageResponse, page_fields


router = APIRouter(prefix="/appointments", tags=["Appointments"])


@router.get("", response_model=AppointmentListResponse)
async def list_appointments(
    search: Optional[str] = None,
    status_filter: Optional[str] = Query(None, alias="status"),
    on_date: Optional[date] = Query(None, alias="date"),
    client_id: Optional[str] = Query(None, alias="clientId"),
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1),
    current_user: User = Depends(get_current_user)
):
    """
    List appointments, latest date first.
    
    - **search**: Match on client name/email or consultant name
    - **status**: Only appointments in this status
    - **date**: Only appointments on this day (YYYY-MM-DD)
    - **clientId**: Only appointments referencing this client
    """
    limit = settings.clamp_limit(limit)
    appointments, total = await AppointmentService.list_appointments(
        search, status_filter, on_date, client_id, (page - 1) * limit, limit
    )
    clients = await AppointmentService.load_clients(appointments)
    
    return AppointmentListResponse(
        appointments=[AppointmentService.appointment_to_response(a, clients) for a in appointments],
        **page_fields(total, page, limit),
    )


@router.post("", response_model=AppointmentResponse, status_code=status.HTTP_201_CREATED)
async def create_appointment(
    request: CreateAppointmentRequest,
    current_user: User = Depends(get_current_user)
):
    """Book a new appointment."""
    appointment = await AppointmentService.create_appointment(request)
    clients = await AppointmentService.load_clients([appointment])
    return AppointmentService.appointment_to_response(appointment, clients)


@router.get("/{appointment_id}", response_model=AppointmentResponse)
async def get_appointment(
    appointment_id: str,
    current_user: User = Depends(get_current_user)
):
    """Get a single appointment with its client."""
    appointment = await AppointmentService.get_appointment(appointment_id)
    clients = await AppointmentService.load_clients([appointment])
    return AppointmentService.appointment_to_response(appointment, clients)


@router.put("/{appointment_id}", response_model=AppointmentResponse)
async def update_appointment(
    appointment_id: str,
    request: UpdateAppointmentRequest,
    current_user: User = Depends(get_current_user)
):
    """Update, reschedule or change the status of an appointment."""
    appointment = await AppointmentService.update_appointment(appointment_id, request)
    clients = await AppointmentService.load_clients([appointment])
    return AppointmentService.appointment_to_response(appointment, clients)


@router.delete("/{appointment_id}", response_model=MessageResponse)
async def delete_appointment(
    appointment_id: str,
    current_user: User = Depends(get_current_user)
):
    """Delete an appointment."""
    await AppointmentService.delete_appointment(appointment_id)
    return MessageResponse(message="Appointment deleted successfully")
