# Patient Management Feature - Router

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from visapilot.config import settings
from visapilot.database import Database, get_database
from visapilot.features.auth.dependencies import get_current_user
from visapilot.features.auth.models import User
from visapilot.features.patients.schemas import (
    CreatePatientRequest,
    PatientListResponse,
    PatientResponse,
    UpdatePatientRequest,
)
from visapilot.features.patients.service import PatientService
from visapilot.shared.exceptions import BadRequestException
from visapilot.shared.schemas import MessageResponse, page_fields


router = APIRouter(prefix="/patients", tags=["Patients"])


@router.get("", response_model=PatientListResponse)
async def list_patients(
    search: Optional[str] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1),
    current_user: User = Depends(get_current_user)
):
    """
    List patients sorted by name.
    
    - **search**: Case-insensitive match on name, email, phone or Patient ID
    """
    limit = settings.clamp_limit(limit)
    patients, total = await PatientService.list_patients(search, (page - 1) * limit, limit)
    
    return PatientListResponse(
        patients=[PatientService.patient_to_response(p) for p in patients],
        **page_fields(total, page, limit),
    )


@router.post("", response_model=PatientResponse, status_code=status.HTTP_201_CREATED)
async def create_patient(
    request: CreatePatientRequest,
    db: Database = Depends(get_database),
    current_user: User = Depends(get_current_user)
):
    """
    Create a new patient.
    
    Returns the created patient with their generated Patient ID.
    """
    patient = await PatientService.create_patient(db, request)
    return PatientService.patient_to_response(patient)


@router.get("/search", response_model=List[PatientResponse])
async def search_patients(
    q: Optional[str] = None,
    limit: int = Query(10, ge=1),
    current_user: User = Depends(get_current_user)
):
    """
    Search patients for the appointment picker.
    
    - **q**: Required search text
    - **limit**: Maximum number of matches (capped)
    """
    if not q or not q.strip():
        raise BadRequestException('Query parameter "q" is required')
    
    patients = await PatientService.search_patients(q, settings.clamp_limit(limit))
    return [PatientService.patient_to_response(p) for p in patients]


@router.get("/{patient_id}", response_model=PatientResponse)
async def get_patient(
    patient_id: str,
    current_user: User = Depends(get_current_user)
):
    """Get a specific patient by id."""
    patient = await PatientService.get_patient(patient_id)
    return PatientService.patient_to_response(patient)


@router.put("/{patient_id}", response_model=PatientResponse)
async def update_patient(
    patient_id: str,
    request: UpdatePatientRequest,
    current_user: User = Depends(get_current_user)
):
    """Update a patient's information."""
    patient = await PatientService.update_patient(patient_id, request)
    return PatientService.patient_to_response(patient)


@router.delete("/{patient_id}", response_model=MessageResponse)
async def delete_patient(
    patient_id: str,
    current_user: User = Depends(get_current_user)
):
    """Permanently delete a patient record."""
    await PatientService.delete_patient(patient_id)
    return MessageResponse(message="Patient deleted successfully")
