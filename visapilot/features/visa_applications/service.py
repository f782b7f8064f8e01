# Visa Applications Feature - Service

import re
from typing import List, Optional, Tuple

from beanie.operators import Or, RegEx

from visapilot.core.logging import logger
from visapilot.features.visa_applications.models import VisaApplication
from visapilot.features.visa_applications.schemas import (
    UpdateVisaApplicationRequest,
    VisaApplicationRequest,
    VisaApplicationResponse,
)
from visapilot.shared.exceptions import NotFoundException
from visapilot.shared.models import parse_object_id


class VisaApplicationService:
    """Service class for visa application tracking."""
    
    @staticmethod
    async def create_application(request: VisaApplicationRequest) -> VisaApplication:
        application = VisaApplication(
            applicant_name=request.applicant_name.strip(),
            visa_type=request.visa_type.strip(),
            status=request.status,
            agent=request.agent,
        )
        await application.insert()
        logger.info(f"Created visa application {application.id} for {application.applicant_name}")
        return application
    
    @staticmethod
    async def list_applications(
        search: Optional[str],
        status: Optional[str],
        skip: int,
        limit: int,
    ) -> Tuple[List[VisaApplication], int]:
        conditions = []
        if search and search.strip():
            pattern = re.escape(search.strip())
            conditions.append(Or(
                RegEx(VisaApplication.applicant_name, pattern, "i"),
                RegEx(VisaApplication.visa_type, pattern, "i"),
                RegEx(VisaApplication.agent, pattern, "i"),
            ))
        if status:
            conditions.append(VisaApplication.status == status)
        
        query = VisaApplication.find(*conditions)
        total = await query.count()
        applications = await query.sort([("created_at", -1), ("_id", -1)]).skip(skip).limit(limit).to_list()
        return applications, total
    
    @staticmethod
    async def get_application(application_id: str) -> VisaApplication:
        application = await VisaApplication.get(parse_object_id(application_id, "Visa application not found"))
        if not application:
            raise NotFoundException("Visa application not found")
        return application
    
    @staticmethod
    async def update_application(application_id: str, request: UpdateVisaApplicationRequest) -> VisaApplication:
        application = await VisaApplicationService.get_application(application_id)
        for field, value in request.model_dump(exclude_unset=True).items():
            setattr(application, field, value)
        application.update_timestamp()
        await application.save()
        logger.info(f"Updated visa application {application.id} (status: {application.status})")
        return application
    
    @staticmethod
    async def delete_application(application_id: str) -> None:
        application = await VisaApplicationService.get_application(application_id)
        await application.delete()
        logger.info(f"Deleted visa application {application_id}")
    
    @staticmethod
    def application_to_response(application: VisaApplication) -> VisaApplicationResponse:
        return VisaApplicationResponse(
            id=str(application.id),
            **application.model_dump(exclude={"id", "revision_id"}),
        )
