# Visa Applications Feature - Models

from typing import Literal
from beanie import Document
from visapilot.shared.models import TimestampMixin


ApplicationStatus = Literal["draft", "submitted", "processing", "approved", "rejected"]


class VisaApplication(Document, TimestampMixin):
    """A visa application being handled by an agent."""
    
    applicant_name: str
    visa_type: str
    status: ApplicationStatus = "draft"
    agent: str = "Unassigned"
    
    class Settings:
        name = "visa_applications"
        use_state_management = True
