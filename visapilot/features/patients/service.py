# Patient Management Feature - Service

import re
from typing import List, Optional, Tuple

from beanie.operators import Or, RegEx
from pymongo.errors import DuplicateKeyError

from visapilot.core.logging import logger
from visapilot.database import Database
from visapilot.features.clients.models import build_emergency_contact
from visapilot.features.patients.models import Patient
from visapilot.features.patients.schemas import (
    CreatePatientRequest,
    PatientResponse,
    UpdatePatientRequest,
)
from visapilot.shared.exceptions import ConflictException, NotFoundException
from visapilot.shared.models import parse_object_id
from visapilot.shared.schemas import clean_optional
from visapilot.shared.sequences import PATIENT_PREFIX, next_display_id


class PatientService:
    """Service class for patient management operations."""
    
    @staticmethod
    def search_filter(term: str):
        pattern = re.escape(term.strip())
        return Or(
            RegEx(Patient.name, pattern, "i"),
            RegEx(Patient.email, pattern, "i"),
            RegEx(Patient.phone, pattern, "i"),
            RegEx(Patient.patient_id, pattern, "i"),
        )
    
    @staticmethod
    async def ensure_email_available(email: str, exclude_id=None) -> None:
        existing = await Patient.find_one(Patient.email == email)
        if existing and existing.id != exclude_id:
            raise ConflictException("A patient with this email already exists")
    
    @staticmethod
    async def create_patient(db: Database, request: CreatePatientRequest) -> Patient:
        """Create a new patient and assign its display id."""
        email = request.email.lower()
        await PatientService.ensure_email_available(email)
        
        patient_id = await next_display_id(db, PATIENT_PREFIX)
        
        patient = Patient(
            patient_id=patient_id,
            name=request.name.strip(),
            email=email,
            phone=request.phone.strip(),
            date_of_birth=request.date_of_birth,
            gender=request.gender,
            address=clean_optional(request.address),
            emergency_contact=build_emergency_contact(request.emergency_contact),
            medical_history=request.medical_history,
            allergies=request.allergies,
            current_medications=request.current_medications,
            blood_type=request.blood_type,
            insurance_provider=clean_optional(request.insurance_provider),
            insurance_number=clean_optional(request.insurance_number),
            assigned_doctor=clean_optional(request.assigned_doctor),
        )
        
        try:
            await patient.insert()
        except DuplicateKeyError:
            raise ConflictException("A patient with this email already exists")
        
        logger.info(f"Created patient {patient_id}")
        return patient
    
    @staticmethod
    async def list_patients(
        search: Optional[str],
        skip: int,
        limit: int,
    ) -> Tuple[List[Patient], int]:
        """Return one page of patients sorted by name, plus the total count."""
        if search and search.strip():
            query = Patient.find(PatientService.search_filter(search))
        else:
            query = Patient.find()
        total = await query.count()
        patients = await query.sort([("name", 1), ("_id", -1)]).skip(skip).limit(limit).to_list()
        return patients, total
    
    @staticmethod
    async def search_patients(term: str, limit: int) -> List[Patient]:
        return await Patient.find(
            PatientService.search_filter(term)
        ).sort([("name", 1)]).limit(limit).to_list()
    
    @staticmethod
    async def get_patient(patient_id: str) -> Patient:
        """Get a patient by primary key."""
        patient = await Patient.get(parse_object_id(patient_id, "Patient not found"))
        if not patient:
            raise NotFoundException("Patient not found")
        return patient
    
    @staticmethod
    async def update_patient(patient_id: str, request: UpdatePatientRequest) -> Patient:
        """Update patient information."""
        patient = await PatientService.get_patient(patient_id)
        
        # Update fields that are provided
        update_dict = request.model_dump(exclude_unset=True)
        
        if update_dict.get("email"):
            update_dict["email"] = update_dict["email"].lower()
            await PatientService.ensure_email_available(update_dict["email"], exclude_id=patient.id)
        
        if "emergency_contact" in update_dict:
            update_dict["emergency_contact"] = build_emergency_contact(request.emergency_contact)
        
        for field, value in update_dict.items():
            setattr(patient, field, value)
        
        patient.update_timestamp()
        await patient.save()
        
        logger.info(f"Updated patient {patient.patient_id}")
        return patient
    
    @staticmethod
    async def delete_patient(patient_id: str) -> Patient:
        """Delete a single patient record; related records are left in place."""
        patient = await PatientService.get_patient(patient_id)
        await patient.delete()
        logger.info(f"Deleted patient {patient.patient_id}")
        return patient
    
    @staticmethod
    def patient_to_response(patient: Patient) -> PatientResponse:
        """Convert Patient model to response schema."""
        return PatientResponse(
            id=str(patient.id),
            **patient.model_dump(exclude={"id", "revision_id"}),
        )
