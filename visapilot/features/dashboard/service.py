# Dashboard Feature - Service

import asyncio
import calendar
from datetime import date, datetime, time, timedelta
from typing import List, Optional

from beanie.operators import In

from visapilot.features.appointments.models import Appointment
from visapilot.features.clients.models import Client
from visapilot.features.dashboard.schemas import (
    ActivityFeedResponse,
    ActivityItem,
    DashboardResponse,
    StatItem,
    UpcomingAppointment,
)
from visapilot.features.patients.models import Patient
from visapilot.shared.formatting import calculate_change, change_type, format_time_ago


RECENT_FETCH = 20
RECENT_ACTIVITIES = 5
UPCOMING_APPOINTMENTS = 4


def one_month_before(day: date) -> date:
    """Same day of the previous month, clamped to that month's length."""
    year, month = (day.year - 1, 12) if day.month == 1 else (day.year, day.month - 1)
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def _midnight(day: date) -> datetime:
    return datetime.combine(day, time.min)


def appointment_activity(appointment: Appointment, now: datetime) -> ActivityItem:
    return ActivityItem(
        id=str(appointment.id),
        type="appointment",
        title=f"Appointment scheduled: {appointment.client_name}",
        description=f"{appointment.consultant_name} - {appointment.appointment_time}",
        time=format_time_ago(appointment.created_at, now),
        created_at=appointment.created_at,
        status=appointment.status,
    )


def client_activity(client: Client, now: datetime) -> ActivityItem:
    return ActivityItem(
        id=f"client-{client.id}",
        type="client",
        title="New client registered",
        description=client.full_name,
        time=format_time_ago(client.created_at, now),
        created_at=client.created_at,
        status="completed",
    )


def patient_activity(patient: Patient, now: datetime) -> ActivityItem:
    return ActivityItem(
        id=f"patient-{patient.id}",
        type="patient",
        title="New patient registered",
        description=patient.name,
        time=format_time_ago(patient.created_at, now),
        created_at=patient.created_at,
        status="completed",
    )


def newest_first(activities: List[ActivityItem]) -> List[ActivityItem]:
    # Stable sort, so equal timestamps keep their source order
    return sorted(activities, key=lambda a: a.created_at, reverse=True)


class DashboardService:
    """Service for dashboard statistics and the activity feed."""
    
    @staticmethod
    async def get_dashboard(today: Optional[date] = None) -> DashboardResponse:
        """
        Build the dashboard in one pass.
        
        Counts and recent-item reads are independent and run concurrently.
        The comparison window is [today - 1 month, today).
        
        Args:
            today: Reference day (UTC today when omitted)
            
        Returns:
            DashboardResponse with stats, recent activities and upcoming appointments
        """
        now = datetime.utcnow()
        today = today or now.date()
        start_of_today = _midnight(today)
        end_of_today = start_of_today + timedelta(days=1)
        start_of_window = _midnight(one_month_before(today))
        
        (
            total_clients,
            clients_last_month,
            appointments_today,
            appointments_last_month,
            recent_appointments,
            recent_clients,
            upcoming,
        ) = await asyncio.gather(
            Client.find().count(),
            Client.find(
                Client.created_at >= start_of_window,
                Client.created_at < start_of_today,
            ).count(),
            Appointment.find(
                Appointment.appointment_date >= start_of_today,
                Appointment.appointment_date < end_of_today,
                Appointment.status != "cancelled",
            ).count(),
            Appointment.find(
                Appointment.appointment_date >= start_of_window,
                Appointment.appointment_date < start_of_today,
                Appointment.status != "cancelled",
            ).count(),
            Appointment.find().sort([("created_at", -1), ("_id", -1)]).limit(RECENT_FETCH).to_list(),
            Client.find().sort([("created_at", -1), ("_id", -1)]).limit(RECENT_FETCH).to_list(),
            Appointment.find(
                Appointment.appointment_date >= start_of_today,
                In(Appointment.status, ["scheduled", "confirmed"]),
            ).sort([("appointment_date", 1), ("appointment_time", 1), ("_id", 1)]).limit(UPCOMING_APPOINTMENTS).to_list(),
        )
        
        stats = [
            StatItem(
                name="totalClients",
                value=str(total_clients),
                change=calculate_change(total_clients, clients_last_month),
                change_type=change_type(total_clients, clients_last_month),
            ),
            StatItem(
                name="appointmentsToday",
                value=str(appointments_today),
                change=calculate_change(appointments_today, appointments_last_month),
                change_type=change_type(appointments_today, appointments_last_month),
            ),
        ]
        
        activities = [appointment_activity(a, now) for a in recent_appointments]
        activities += [client_activity(c, now) for c in recent_clients]
        
        upcoming_appointments = [
            UpcomingAppointment(
                id=str(a.id),
                client=a.client_name or "Unknown Client",
                time=a.appointment_time or "N/A",
                type=a.appointment_type,
                status="confirmed" if a.status == "confirmed" else "pending",
            )
            for a in upcoming
        ]
        
        return DashboardResponse(
            stats=stats,
            recent_activities=newest_first(activities)[:RECENT_ACTIVITIES],
            upcoming_appointments=upcoming_appointments,
        )
    
    @staticmethod
    async def get_activity_feed(limit: int, skip: int) -> ActivityFeedResponse:
        """
        Merge every appointment, client and patient creation into one
        newest-first stream and return the requested window of it.
        """
        now = datetime.utcnow()
        appointments, clients, patients = await asyncio.gather(
            Appointment.find().sort([("created_at", -1), ("_id", -1)]).to_list(),
            Client.find().sort([("created_at", -1), ("_id", -1)]).to_list(),
            Patient.find().sort([("created_at", -1), ("_id", -1)]).to_list(),
        )
        
        activities = [appointment_activity(a, now) for a in appointments]
        activities += [client_activity(c, now) for c in clients]
        activities += [patient_activity(p, now) for p in patients]
        activities = newest_first(activities)
        
        return ActivityFeedResponse(
            activities=activities[skip:skip + limit],
            total=len(activities),
            limit=limit,
            skip=skip,
        )
