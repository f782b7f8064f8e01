# Dashboard Feature - Router

from fastapi import APIRouter, Depends, Query

from visapilot.config import settings
from visapilot.features.auth.dependencies import get_current_user
from visapilot.features.auth.models import User
from visapilot.features.dashboard.schemas import ActivityFeedResponse, DashboardResponse
from visapilot.features.dashboard.service import DashboardService


router = APIRouter(prefix="/dashboard", tags=["Dashboard"])
activity_router = APIRouter(prefix="/activity", tags=["Dashboard"])


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    current_user: User = Depends(get_current_user)
):
    """
    Get the dashboard.
    
    Returns:
    - Total clients and today's appointments, each with the change
      against the trailing month
    - The 5 most recent activities (appointments and new clients)
    - Up to 4 upcoming scheduled or confirmed appointments
    """
    return await DashboardService.get_dashboard()


@activity_router.get("", response_model=ActivityFeedResponse)
async def get_activity(
    limit: int = Query(100, ge=1, description="Number of activities to return (capped)"),
    skip: int = Query(0, ge=0, description="Number of activities to skip"),
    current_user: User = Depends(get_current_user)
):
    """
    Get the full activity history, newest first.
    
    Combines appointments booked, clients registered and patients registered.
    """
    return await DashboardService.get_activity_feed(settings.clamp_limit(limit), skip)
