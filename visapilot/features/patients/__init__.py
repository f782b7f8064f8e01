# Patient Management Feature

from visapilot.features.patients.models import Patient
from visapilot.features.patients.router import router
from visapilot.features.patients.service import PatientService

__all__ = ["Patient", "router", "PatientService"]
