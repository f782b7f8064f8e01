# Client Management Feature - Models

from typing import Optional, List, Literal
from datetime import date
from beanie import Document, Indexed
from pydantic import BaseModel, EmailStr, Field
from visapilot.shared.models import TimestampMixin
from visapilot.shared.schemas import clean_optional


Gender = Literal["male", "female", "other", "prefer-not-to-say"]


class EmergencyContact(BaseModel):
    """Emergency contact embedded in client and patient records."""
    name: Optional[str] = None
    phone: Optional[str] = None
    relationship: Optional[str] = None


def build_emergency_contact(contact) -> Optional[EmergencyContact]:
    """Keep an emergency contact only if at least one field has a value."""
    if contact is None:
        return None
    fields = {
        key: clean_optional(value)
        for key, value in contact.model_dump().items()
    }
    if not any(fields.values()):
        return None
    return EmergencyContact(**fields)


class Client(Document, TimestampMixin):
    """Visa agency client record."""
    
    # Display id (e.g., CLI-0001), assigned once at creation
    client_id: Indexed(str, unique=True)
    
    # Identity
    first_name: str
    last_name: str
    email: Indexed(EmailStr, unique=True)
    phone: str
    date_of_birth: date
    gender: Gender
    
    # Address
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    
    # Passport and visa
    passport_number: str
    passport_country: str
    visa_type: str
    visa_application_date: date
    visa_expiration_date: Optional[date] = None
    
    special_requirements: List[str] = Field(default_factory=list)
    current_applications: List[str] = Field(default_factory=list)
    travel_history: List[str] = Field(default_factory=list)
    emergency_contact: Optional[EmergencyContact] = None
    
    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
    
    class Settings:
        name = "clients"
        use_state_management = True
    
    class Config:
        json_schema_extra = {
            "example": {
                "client_id": "CLI-0001",
                "first_name": "Jane",
                "last_name": "Doe",
                "email": "jane@example.com",
                "phone": "555-0100",
                "date_of_birth": "1990-01-01",
                "gender": "female",
                "passport_number": "P1234567",
                "passport_country": "US",
                "visa_type": "tourist",
                "visa_application_date": "2024-01-01",
            }
        }
