# Visa Applications Feature - Router

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from visapilot.config import settings
from visapilot.features.auth.dependencies import get_current_user
from visapilot.features.auth.models import User
from visapilot.features.visa_applications.models import ApplicationStatus
from visapilot.features.visa_applications.schemas import (
    UpdateVisaApplicationRequest,
    VisaApplicationListResponse,
    VisaApplicationRequest,
    VisaApplicationResponse,
)
from visapilot.features.visa_applications.service import VisaApplicationService
from visapilot.shared.schemas import MessageResponse, page_fields


router = APIRouter(prefix="/visa-applications", tags=["Visa Applications"])


@router.get("", response_model=VisaApplicationListResponse)
async def list_applications(
    search: Optional[str] = None,
    application_status: Optional[ApplicationStatus] = Query(None, alias="status"),
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1),
    current_user: User = Depends(get_current_user)
):
    """
    List visa applications, newest first.
    
    - **search**: Match on applicant name, visa type or agent
    - **status**: draft | submitted | processing | approved | rejected
    """
    limit = settings.clamp_limit(limit)
    applications, total = await VisaApplicationService.list_applications(
        search, application_status, (page - 1) * limit, limit
    )
    
    return VisaApplicationListResponse(
        visa_applications=[VisaApplicationService.application_to_response(a) for a in applications],
        **page_fields(total, page, limit),
    )


@router.post("", response_model=VisaApplicationResponse, status_code=status.HTTP_201_CREATED)
async def create_application(
    request: VisaApplicationRequest,
    current_user: User = Depends(get_current_user)
):
    application = await VisaApplicationService.create_application(request)
    return VisaApplicationService.application_to_response(application)


@router.get("/{application_id}", response_model=VisaApplicationResponse)
async def get_application(
    application_id: str,
    current_user: User = Depends(get_current_user)
):
    application = await VisaApplicationService.get_application(application_id)
    return VisaApplicationService.application_to_response(application)


@router.put("/{application_id}", response_model=VisaApplicationResponse)
async def update_application(
    application_id: str,
    request: UpdateVisaApplicationRequest,
    current_user: User = Depends(get_current_user)
):
    application = await VisaApplicationService.update_application(application_id, request)
    return VisaApplicationService.application_to_response(application)


@router.delete("/{application_id}", response_model=MessageResponse)
async def delete_application(
    application_id: str,
    current_user: User = Depends(get_current_user)
):
    await VisaApplicationService.delete_application(application_id)
    return MessageResponse(message="Visa application deleted successfully")
