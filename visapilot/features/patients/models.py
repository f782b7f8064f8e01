# Patient Management Feature - Models

from typing import Optional, List, Literal
from datetime import date
from beanie import Document, Indexed
from pydantic import EmailStr, Field
from visapilot.features.clients.models import EmergencyContact, Gender
from visapilot.shared.models import TimestampMixin


BloodType = Literal["A+", "A-", "B+", "B-", "AB+", "AB-", "O+", "O-"]


class Patient(Document, TimestampMixin):
    """Patient document model for clinic-side health records."""
    
    # Display id (e.g., PAT-0001), assigned once at creation
    patient_id: Indexed(str, unique=True)
    
    # Personal information
    name: str
    email: Indexed(EmailStr, unique=True)
    phone: str
    date_of_birth: date
    gender: Gender
    address: Optional[str] = None
    emergency_contact: Optional[EmergencyContact] = None
    
    # Health information
    medical_history: List[str] = Field(default_factory=list)
    allergies: List[str] = Field(default_factory=list)
    current_medications: List[str] = Field(default_factory=list)
    blood_type: Optional[BloodType] = None
    insurance_provider: Optional[str] = None
    insurance_number: Optional[str] = None
    assigned_doctor: Optional[str] = None
    
    class Settings:
        name = "patients"
        use_state_management = True
    
    class Config:
        json_schema_extra = {
            "example": {
                "patient_id": "PAT-0001",
                "name": "Sarah Johnson",
                "email": "patient@email.com",
                "phone": "+1234567890",
                "date_of_birth": "1990-05-15",
                "gender": "female",
                "medical_history": ["Hypertension"],
                "allergies": ["Penicillin"],
                "current_medications": ["Lisinopril 10mg"],
                "blood_type": "O+",
                "assigned_doctor": "Dr. Smith",
            }
        }
