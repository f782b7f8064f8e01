from fastapi import APIRouter, Response

from visapilot.config import settings
from visapilot.features.auth.models import User
from visapilot.features.auth.schemas import (
    LoginRequest,
    LoginResponse,
    OtpRequest,
    OtpRequestResponse,
    OtpVerifyRequest,
)
from visapilot.features.auth.service import AuthService
from visapilot.shared.schemas import MessageResponse


router = APIRouter(prefix="/auth", tags=["Authentication"])


def _open_session(response: Response, user: User, access_token: str) -> LoginResponse:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=access_token,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )
    return LoginResponse(
        access_token=access_token,
        token_type="bearer",
        user=AuthService.user_to_response(user),
    )


@router.post("/login", response_model=LoginResponse)
async def login(login_data: LoginRequest, response: Response):
    """
    Authenticate with email and password.
    
    Sets the session cookie and also returns the token for Bearer use.
    """
    user, access_token = await AuthService.login(login_data.email, login_data.password)
    return _open_session(response, user, access_token)


@router.post("/otp/request", response_model=OtpRequestResponse)
async def request_otp(request: OtpRequest):
    """
    Check credentials and email a 6-digit verification code.
    
    - **email**: User's email address
    - **password**: User's password
    """
    sent = await AuthService.request_otp(request.email, request.password)
    if not sent:
        return OtpRequestResponse(success=False, message="Failed to send verification code")
    return OtpRequestResponse(message="Verification code sent")


@router.post("/otp/verify", response_model=LoginResponse)
async def verify_otp(request: OtpVerifyRequest, response: Response):
    """
    Exchange a pending verification code for a session.
    """
    user, access_token = await AuthService.verify_otp(request.email, request.otp)
    return _open_session(response, user, access_token)


@router.post("/logout", response_model=MessageResponse)
async def logout(response: Response):
    """Clear the session cookie."""
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return MessageResponse(message="Logged out")
