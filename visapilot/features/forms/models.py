# Form Templates Feature - Models

from typing import Optional, List, Literal
from beanie import Document, Indexed
from pydantic import BaseModel, Field
from visapilot.shared.models import TimestampMixin


FieldType = Literal["text", "email", "phone", "date", "select", "checkbox", "radio", "textarea"]
FormStatus = Literal["draft", "active", "archived"]


class FormField(BaseModel):
    """One input on an application form."""
    id: str
    name: str
    type: FieldType
    label: str
    placeholder: Optional[str] = None
    required: bool = False
    # Choices for select and radio inputs
    options: List[str] = Field(default_factory=list)
    default_value: Optional[str] = None


class FormTemplate(Document, TimestampMixin):
    """Country-specific application form layout."""
    
    # Agency-assigned code (e.g., UK-STUDENT-2024)
    template_id: Indexed(str, unique=True)
    name: str
    country: str
    category: str
    description: str = ""
    version: str = "2024"
    status: FormStatus = "draft"
    fields: List[FormField] = Field(default_factory=list)
    
    class Settings:
        name = "form_templates"
        use_state_management = True
