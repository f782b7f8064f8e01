# Form Templates Feature - Schemas

from typing import Optional, List
from datetime import datetime
from pydantic import Field, field_validator

from visapilot.features.forms.models import FieldType, FormStatus
from visapilot.shared.schemas import CamelModel, PageInfo, PartialUpdateModel


REQUIRED_TEXT = ("name", "template_id", "country", "category")


class FormFieldSchema(CamelModel):
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    type: FieldType
    label: str = Field(..., min_length=1)
    placeholder: Optional[str] = None
    required: bool = False
    options: List[str] = Field(default_factory=list)
    default_value: Optional[str] = None


def check_unique_field_names(fields: List[FormFieldSchema]) -> List[FormFieldSchema]:
    names = [field.name for field in fields]
    if len(names) != len(set(names)):
        raise ValueError("Field names must be unique within a form")
    return fields


class CreateFormTemplateRequest(CamelModel):
    """Request schema for creating a form template."""
    template_id: str
    name: str
    country: str
    category: str
    description: str = ""
    version: str = "2024"
    status: FormStatus = "draft"
    fields: List[FormFieldSchema] = Field(default_factory=list)
    
    @field_validator(*REQUIRED_TEXT)
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Field is required")
        return v
    
    @field_validator("fields")
    @classmethod
    def unique_names(cls, v: List[FormFieldSchema]) -> List[FormFieldSchema]:
        return check_unique_field_names(v)


class UpdateFormTemplateRequest(PartialUpdateModel):
    """Request schema for updating a form template."""
    template_id: Optional[str] = None
    name: Optional[str] = None
    country: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    version: Optional[str] = Field(None, min_length=1)
    status: Optional[FormStatus] = None
    fields: Optional[List[FormFieldSchema]] = None
    
    @field_validator(*REQUIRED_TEXT)
    @classmethod
    def strip_required(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("Field is required")
        return v
    
    @field_validator("fields")
    @classmethod
    def unique_names(cls, v: Optional[List[FormFieldSchema]]) -> Optional[List[FormFieldSchema]]:
        return v if v is None else check_unique_field_names(v)


class FormTemplateResponse(CamelModel):
    id: str
    template_id: str
    name: str
    country: str
    category: str
    description: str
    version: str
    status: str
    fields: List[FormFieldSchema] = []
    created_at: datetime
    updated_at: datetime


class FormTemplateListResponse(PageInfo):
    templates: List[FormTemplateResponse]
