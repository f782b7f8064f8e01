# Form Templates Feature - Service

import re
from typing import List, Optional, Tuple

from beanie.operators import Or, RegEx

from visapilot.core.logging import logger
from visapilot.features.forms.models import FormField, FormTemplate
from visapilot.features.forms.schemas import (
    CreateFormTemplateRequest,
    FormTemplateResponse,
    UpdateFormTemplateRequest,
)
from visapilot.shared.exceptions import ConflictException, NotFoundException
from visapilot.shared.models import parse_object_id


class FormTemplateService:
    """Service class for application form templates."""
    
    @staticmethod
    async def ensure_template_id_available(template_id: str, exclude_id=None) -> None:
        existing = await FormTemplate.find_one(FormTemplate.template_id == template_id)
        if existing and existing.id != exclude_id:
            raise ConflictException("Template ID already exists")
    
    @staticmethod
    async def create_template(request: CreateFormTemplateRequest) -> FormTemplate:
        await FormTemplateService.ensure_template_id_available(request.template_id)
        
        data = request.model_dump(exclude={"fields"})
        template = FormTemplate(
            **data,
            fields=[FormField(**field.model_dump()) for field in request.fields],
        )
        await template.insert()
        
        logger.info(f"Created form template {template.template_id} ({template.country}, {len(template.fields)} fields)")
        return template
    
    @staticmethod
    async def list_templates(
        search: Optional[str],
        status: Optional[str],
        country: Optional[str],
        skip: int,
        limit: int,
    ) -> Tuple[List[FormTemplate], int]:
        """Newest first, optionally narrowed by text, status and country."""
        conditions = []
        if search and search.strip():
            pattern = re.escape(search.strip())
            conditions.append(Or(
                RegEx(FormTemplate.name, pattern, "i"),
                RegEx(FormTemplate.template_id, pattern, "i"),
                RegEx(FormTemplate.category, pattern, "i"),
            ))
        if status:
            conditions.append(FormTemplate.status == status)
        if country and country.strip():
            conditions.append(RegEx(FormTemplate.country, f"^{re.escape(country.strip())}$", "i"))
        
        query = FormTemplate.find(*conditions)
        total = await query.count()
        templates = await query.sort([("created_at", -1), ("_id", -1)]).skip(skip).limit(limit).to_list()
        return templates, total
    
    @staticmethod
    async def get_template(template_id: str) -> FormTemplate:
        template = await FormTemplate.get(parse_object_id(template_id, "Form template not found"))
        if not template:
            raise NotFoundException("Form template not found")
        return template
    
    @staticmethod
    async def update_template(template_id: str, request: UpdateFormTemplateRequest) -> FormTemplate:
        template = await FormTemplateService.get_template(template_id)
        
        update_dict = request.model_dump(exclude_unset=True)
        if "template_id" in update_dict:
            await FormTemplateService.ensure_template_id_available(update_dict["template_id"], exclude_id=template.id)
        if "fields" in update_dict:
            update_dict["fields"] = [FormField(**field) for field in update_dict["fields"]]
        
        for field, value in update_dict.items():
            setattr(template, field, value)
        
        template.update_timestamp()
        await template.save()
        
        logger.info(f"Updated form template {template.template_id}")
        return template
    
    @staticmethod
    async def delete_template(template_id: str) -> None:
        template = await FormTemplateService.get_template(template_id)
        await template.delete()
        logger.info(f"Deleted form template {template.template_id}")
    
    @staticmethod
    def template_to_response(template: FormTemplate) -> FormTemplateResponse:
        return FormTemplateResponse(id=str(template.id), **template.model_dump(exclude={"id", "revision_id"}))
