# Client Management Feature - Schemas

from typing import Optional, List
from datetime import date, datetime
from pydantic import EmailStr, Field, field_validator

from visapilot.features.clients.models import Gender
from visapilot.shared.schemas import CamelModel, PageInfo, PartialUpdateModel


class EmergencyContactSchema(CamelModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    relationship: Optional[str] = None


# ============== Create Client ==============

class CreateClientRequest(CamelModel):
    """Request schema for creating a new client."""
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone: str = Field(..., min_length=1, max_length=30)
    date_of_birth: date
    gender: Gender
    address: Optional[str] = Field(None, max_length=500)
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    passport_number: str = Field(..., min_length=1)
    passport_country: str = Field(..., min_length=1)
    visa_type: str = Field(..., min_length=1)
    visa_application_date: date
    visa_expiration_date: Optional[date] = None
    special_requirements: List[str] = Field(default_factory=list)
    current_applications: List[str] = Field(default_factory=list)
    travel_history: List[str] = Field(default_factory=list)
    emergency_contact: Optional[EmergencyContactSchema] = None
    
    @field_validator("first_name", "last_name", "phone", "passport_number", "passport_country", "visa_type")
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Field is required")
        return v


# ============== Update Client ==============

class UpdateClientRequest(PartialUpdateModel):
    """Request schema for updating client information."""
    nullable_fields = frozenset({
        "address", "city", "state", "zip_code", "visa_expiration_date", "emergency_contact",
    })
    
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, min_length=1, max_length=30)
    date_of_birth: Optional[date] = None
    gender: Optional[Gender] = None
    address: Optional[str] = Field(None, max_length=500)
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    passport_number: Optional[str] = None
    passport_country: Optional[str] = None
    visa_type: Optional[str] = None
    visa_application_date: Optional[date] = None
    visa_expiration_date: Optional[date] = None
    special_requirements: Optional[List[str]] = None
    current_applications: Optional[List[str]] = None
    travel_history: Optional[List[str]] = None
    emergency_contact: Optional[EmergencyContactSchema] = None


# ============== Client Response ==============

class ClientResponse(CamelModel):
    """Response schema for client data."""
    id: str
    client_id: str
    first_name: str
    last_name: str
    email: str
    phone: str
    date_of_birth: date
    gender: str
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    passport_number: str
    passport_country: str
    visa_type: str
    visa_application_date: date
    visa_expiration_date: Optional[date] = None
    special_requirements: List[str] = []
    current_applications: List[str] = []
    travel_history: List[str] = []
    emergency_contact: Optional[EmergencyContactSchema] = None
    created_at: datetime
    updated_at: datetime


class ClientListResponse(PageInfo):
    """Response schema for a page of clients."""
    clients: List[ClientResponse]
