# Visa Applications Feature - Schemas

from typing import Optional, List
from datetime import datetime
from pydantic import Field

from visapilot.features.visa_applications.models import ApplicationStatus
from visapilot.shared.schemas import CamelModel, PageInfo, PartialUpdateModel


class VisaApplicationRequest(CamelModel):
    applicant_name: str = Field(..., min_length=1)
    visa_type: str = Field(..., min_length=1)
    status: ApplicationStatus = "draft"
    agent: str = "Unassigned"


class UpdateVisaApplicationRequest(PartialUpdateModel):
    applicant_name: Optional[str] = Field(None, min_length=1)
    visa_type: Optional[str] = Field(None, min_length=1)
    status: Optional[ApplicationStatus] = None
    agent: Optional[str] = None


class VisaApplicationResponse(CamelModel):
    id: str
    applicant_name: str
    visa_type: str
    status: str
    agent: str
    created_at: datetime
    updated_at: datetime


class VisaApplicationListResponse(PageInfo):
    visa_applications: List[VisaApplicationResponse]
