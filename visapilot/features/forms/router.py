# Form Templates Feature - Router

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from visapilot.config import settings
from visapilot.features.auth.dependencies import get_current_user
from visapilot.features.auth.models import User
from visapilot.features.forms.models import FormStatus
from visapilot.features.forms.schemas import (
    CreateFormTemplateRequest,
    FormTemplateListResponse,
    FormTemplateResponse,
    UpdateFormTemplateRequest,
)
from visapilot.features.forms.service import FormTemplateService
from visapilot.shared.schemas import MessageResponse, page_fields


router = APIRouter(prefix="/forms", tags=["Form Templates"])


@router.get("", response_model=FormTemplateListResponse)
async def list_form_templates(
    search: Optional[str] = None,
    status_filter: Optional[FormStatus] = Query(None, alias="status"),
    country: Optional[str] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1),
    current_user: User = Depends(get_current_user)
):
    """
    List form templates, newest first.
    
    - **search**: Match on name, template ID or category
    - **status**: draft, active or archived
    - **country**: Exact country, case-insensitive
    """
    limit = settings.clamp_limit(limit)
    templates, total = await FormTemplateService.list_templates(
        search, status_filter, country, (page - 1) * limit, limit
    )
    return FormTemplateListResponse(
        templates=[FormTemplateService.template_to_response(t) for t in templates],
        **page_fields(total, page, limit),
    )


@router.post("", response_model=FormTemplateResponse, status_code=status.HTTP_201_CREATED)
async def create_form_template(
    request: CreateFormTemplateRequest,
    current_user: User = Depends(get_current_user)
):
    """Create a form template; template IDs are unique."""
    template = await FormTemplateService.create_template(request)
    return FormTemplateService.template_to_response(template)


@router.get("/{template_id}", response_model=FormTemplateResponse)
async def get_form_template(
    template_id: str,
    current_user: User = Depends(get_current_user)
):
    template = await FormTemplateService.get_template(template_id)
    return FormTemplateService.template_to_response(template)


@router.put("/{template_id}", response_model=FormTemplateResponse)
async def update_form_template(
    template_id: str,
    request: UpdateFormTemplateRequest,
    current_user: User = Depends(get_current_user)
):
    template = await FormTemplateService.update_template(template_id, request)
    return FormTemplateService.template_to_response(template)


@router.delete("/{template_id}", response_model=MessageResponse)
async def delete_form_template(
    template_id: str,
    current_user: User = Depends(get_current_user)
):
    await FormTemplateService.delete_template(template_id)
    return MessageResponse(message="Form template deleted successfully")
