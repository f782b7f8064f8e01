from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from visapilot.shared.schemas import CamelModel


# Request Schemas
class LoginRequest(CamelModel):
    """Login request schema."""
    
    email: EmailStr
    password: str = Field(..., min_length=1)


class OtpRequest(CamelModel):
    """Request a one-time code; the password is checked first."""
    
    email: EmailStr
    password: str = Field(..., min_length=1)


class OtpVerifyRequest(CamelModel):
    """Exchange a one-time code for a session."""
    
    email: EmailStr
    otp: str = Field(..., min_length=6, max_length=6)


# Response Schemas
class UserResponse(CamelModel):
    """User response schema."""
    
    id: str
    email: str
    name: str
    role: str
    phone: Optional[str] = None
    image: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime


class LoginResponse(CamelModel):
    """Login response schema."""
    
    access_token: str
    token_type: str = "bearer"
    user: UserResponse


class OtpRequestResponse(CamelModel):
    """Response after a code was issued."""
    
    success: bool = True
    message: str
