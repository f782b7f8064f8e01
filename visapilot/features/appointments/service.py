# Appointments Feature - Service

import re
from datetime import date, datetime, time, timedelta
from typing import Dict, List, Optional, Tuple

from beanie.operators import Or, RegEx

from visapilot.core.logging import logger
from visapilot.features.appointments.models import Appointment
from visapilot.features.appointments.schemas import (
    AppointmentResponse,
    ClientSummary,
    CreateAppointmentRequest,
    UpdateAppointmentRequest,
)
from visapilot.features.clients.models import Client
from visapilot.shared.exceptions import BadRequestException, NotFoundException
from visapilot.shared.models import parse_object_id


def day_start(day: date) -> datetime:
    return datetime.combine(day, time.min)


class AppointmentService:
    """Service class for appointment scheduling."""
    
    @staticmethod
    async def _resolve_client(client_id: Optional[str]) -> Optional[Client]:
        if not client_id:
            return None
        client = await Client.get(parse_object_id(client_id, "Client not found"))
        if not client:
            raise NotFoundException("Client not found")
        return client
    
    @staticmethod
    async def create_appointment(request: CreateAppointmentRequest) -> Appointment:
        """Book an appointment, copying contact details from a referenced client."""
        client = await AppointmentService._resolve_client(request.client_id)
        
        client_name = request.client_name or (client.full_name if client else None)
        client_email = request.client_email or (client.email if client else None)
        client_phone = request.client_phone or (client.phone if client else None)
        
        missing = [
            name for name, value in (
                ("clientName", client_name),
                ("clientEmail", client_email),
                ("clientPhone", client_phone),
            ) if not value
        ]
        if missing:
            raise BadRequestException(f"Missing required fields: {', '.join(missing)}")
        
        appointment = Appointment(
            client_ref=client.id if client else None,
            client_name=client_name.strip(),
            client_email=client_email.lower(),
            client_phone=client_phone.strip(),
            consultant_name=request.consultant_name.strip(),
            consultant_email=request.consultant_email.lower() if request.consultant_email else None,
            appointment_date=day_start(request.appointment_date),
            appointment_time=request.appointment_time,
            appointment_type=request.appointment_type,
            status=request.status,
            reason=request.reason,
            notes=request.notes,
            requirements=request.requirements,
            consultation_notes=request.consultation_notes,
            recommendations=request.recommendations,
        )
        await appointment.insert()
        
        logger.info(f"Created appointment {appointment.id} for {appointment.client_name}")
        return appointment
    
    @staticmethod
    async def list_appointments(
        search: Optional[str],
        status: Optional[str],
        on_date: Optional[date],
        client_id: Optional[str],
        skip: int,
        limit: int,
    ) -> Tuple[List[Appointment], int]:
        """Return one page of appointments, latest date first."""
        conditions = []
        if search and search.strip():
            pattern = re.escape(search.strip())
            conditions.append(Or(
                RegEx(Appointment.client_name, pattern, "i"),
                RegEx(Appointment.client_email, pattern, "i"),
                RegEx(Appointment.consultant_name, pattern, "i"),
            ))
        if status:
            conditions.append(Appointment.status == status)
        if on_date:
            start = day_start(on_date)
            conditions.append(Appointment.appointment_date >= start)
            conditions.append(Appointment.appointment_date < start + timedelta(days=1))
        if client_id:
            conditions.append(Appointment.client_ref == parse_object_id(client_id, "Client not found"))
        
        query = Appointment.find(*conditions)
        total = await query.count()
        appointments = await query.sort(
            [("appointment_date", -1), ("appointment_time", -1), ("_id", -1)]
        ).skip(skip).limit(limit).to_list()
        return appointments, total
    
    @staticmethod
    async def get_appointment(appointment_id: str) -> Appointment:
        appointment = await Appointment.get(parse_object_id(appointment_id, "Appointment not found"))
        if not appointment:
            raise NotFoundException("Appointment not found")
        return appointment
    
    @staticmethod
    async def update_appointment(appointment_id: str, request: UpdateAppointmentRequest) -> Appointment:
        """Merge the provided fields into an appointment."""
        appointment = await AppointmentService.get_appointment(appointment_id)
        
        update_dict = request.model_dump(exclude_unset=True)
        
        if "client_id" in update_dict:
            client = await AppointmentService._resolve_client(update_dict.pop("client_id"))
            appointment.client_ref = client.id if client else None
            if client:
                update_dict.setdefault("client_name", client.full_name)
                update_dict.setdefault("client_email", client.email)
                update_dict.setdefault("client_phone", client.phone)
        
        if update_dict.get("appointment_date"):
            update_dict["appointment_date"] = day_start(update_dict["appointment_date"])
        
        for field, value in update_dict.items():
            setattr(appointment, field, value)
        
        appointment.update_timestamp()
        await appointment.save()
        
        logger.info(f"Updated appointment {appointment.id} (status: {appointment.status})")
        return appointment
    
    @staticmethod
    async def delete_appointment(appointment_id: str) -> None:
        appointment = await AppointmentService.get_appointment(appointment_id)
        await appointment.delete()
        logger.info(f"Deleted appointment {appointment_id}")
    
    @staticmethod
    async def load_clients(appointments: List[Appointment]) -> Dict[str, Client]:
        """Fetch every referenced client in one query, keyed by id."""
        refs = list({a.client_ref for a in appointments if a.client_ref})
        if not refs:
            return {}
        clients = await Client.find({"_id": {"$in": refs}}).to_list()
        return {str(c.id): c for c in clients}
    
    @staticmethod
    def appointment_to_response(
        appointment: Appointment,
        clients: Dict[str, Client],
    ) -> AppointmentResponse:
        """Convert an Appointment to its response, joining the referenced client."""
        client_id = str(appointment.client_ref) if appointment.client_ref else None
        client = clients.get(client_id) if client_id else None
        
        data = appointment.model_dump(exclude={"id", "revision_id", "client_ref", "appointment_date"})
        return AppointmentResponse(
            id=str(appointment.id),
            client_id=client_id,
            client=ClientSummary(
                id=str(client.id),
                client_id=client.client_id,
                name=client.full_name,
                email=client.email,
                phone=client.phone,
            ) if client else None,
            appointment_date=appointment.appointment_date.date(),
            **data,
        )
