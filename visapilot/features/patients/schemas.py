# Patient Management Feature - Schemas

from typing import Optional, List
from datetime import date, datetime
from pydantic import EmailStr, Field

from visapilot.features.clients.models import Gender
from visapilot.features.clients.schemas import EmergencyContactSchema
from visapilot.features.patients.models import BloodType
from visapilot.shared.schemas import CamelModel, PageInfo, PartialUpdateModel


# ============== Create Patient ==============

class CreatePatientRequest(CamelModel):
    """Request schema for creating a new patient."""
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone: str = Field(..., min_length=1, max_length=30)
    date_of_birth: date
    gender: Gender
    address: Optional[str] = Field(None, max_length=500)
    emergency_contact: Optional[EmergencyContactSchema] = None
    medical_history: List[str] = Field(default_factory=list)
    allergies: List[str] = Field(default_factory=list)
    current_medications: List[str] = Field(default_factory=list)
    blood_type: Optional[BloodType] = None
    insurance_provider: Optional[str] = None
    insurance_number: Optional[str] = None
    assigned_doctor: Optional[str] = None


# ============== Update Patient ==============

class UpdatePatientRequest(PartialUpdateModel):
    """Request schema for updating patient information."""
    nullable_fields = frozenset({
        "address", "emergency_contact", "blood_type",
        "insurance_provider", "insurance_number", "assigned_doctor",
    })
    
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, min_length=1, max_length=30)
    date_of_birth: Optional[date] = None
    gender: Optional[Gender] = None
    address: Optional[str] = Field(None, max_length=500)
    emergency_contact: Optional[EmergencyContactSchema] = None
    medical_history: Optional[List[str]] = None
    allergies: Optional[List[str]] = None
    current_medications: Optional[List[str]] = None
    blood_type: Optional[BloodType] = None
    insurance_provider: Optional[str] = None
    insurance_number: Optional[str] = None
    assigned_doctor: Optional[str] = None


# ============== Patient Response ==============

class PatientResponse(CamelModel):
    """Response schema for patient data."""
    id: str
    patient_id: str
    name: str
    email: str
    phone: str
    date_of_birth: date
    gender: str
    address: Optional[str] = None
    emergency_contact: Optional[EmergencyContactSchema] = None
    medical_history: List[str] = []
    allergies: List[str] = []
    current_medications: List[str] = []
    blood_type: Optional[str] = None
    insurance_provider: Optional[str] = None
    insurance_number: Optional[str] = None
    assigned_doctor: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class PatientListResponse(PageInfo):
    """Response schema for a page of patients."""
    patients: List[PatientResponse]
