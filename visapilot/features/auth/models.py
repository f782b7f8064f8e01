from beanie import Document, Indexed
from pydantic import EmailStr
from typing import Optional, Literal
from datetime import datetime
from visapilot.shared.models import TimestampMixin


UserRole = Literal["doctor", "admin", "staff"]


class User(Document, TimestampMixin):
    """Staff account able to sign in to the CRM."""
    
    email: Indexed(EmailStr, unique=True)
    name: str
    password_hash: Optional[str] = None
    role: UserRole = "staff"
    phone: Optional[str] = None
    image: Optional[str] = None
    is_active: bool = True
    
    # Pending one-time code for the secondary verification step
    otp_hash: Optional[str] = None
    otp_expires_at: Optional[datetime] = None
    otp_requested_at: Optional[datetime] = None
    
    class Settings:
        name = "users"
        use_state_management = True
    
    class Config:
        json_schema_extra = {
            "example": {
                "email": "admin@visaagency.com",
                "name": "Agency Admin",
                "role": "admin",
                "phone": "+1234567890",
            }
        }
