from datetime import datetime, timedelta
from typing import Optional

from beanie import PydanticObjectId
from bson.errors import InvalidId

from visapilot.config import settings
from visapilot.core.email import send_otp_email
from visapilot.core.logging import logger
from visapilot.core.security import (
    create_access_token,
    generate_otp,
    get_password_hash,
    verify_password,
)
from visapilot.features.auth.models import User
from visapilot.features.auth.schemas import UserResponse
from visapilot.shared.exceptions import CredentialsException


class AuthService:
    """Authentication service for handling login and one-time codes."""
    
    @staticmethod
    async def get_user_by_email(email: str) -> Optional[User]:
        return await User.find_one(User.email == email.lower().strip())
    
    @staticmethod
    async def get_user_by_id(user_id: str) -> Optional[User]:
        try:
            object_id = PydanticObjectId(user_id)
        except (InvalidId, TypeError):
            return None
        return await User.get(object_id)
    
    @staticmethod
    async def authenticate(email: str, password: str) -> User:
        """Check email and password, raising 401 on any mismatch."""
        user = await AuthService.get_user_by_email(email)
        if not user or not user.password_hash:
            logger.warning(f"Rejected login for {email}: unknown user or no password set")
            raise CredentialsException("Invalid email or password")
        
        if not verify_password(password, user.password_hash):
            logger.warning(f"Rejected login for {email}: wrong password")
            raise CredentialsException("Invalid email or password")
        
        if not user.is_active:
            raise CredentialsException("Account is inactive")
        
        return user
    
    @staticmethod
    def issue_token(user: User) -> str:
        return create_access_token(data={"sub": str(user.id), "role": user.role})
    
    @staticmethod
    async def login(email: str, password: str) -> tuple[User, str]:
        """
        Authenticate user and return access token.
        
        Returns:
            tuple: (user, access_token)
        """
        user = await AuthService.authenticate(email, password)
        logger.info(f"User {user.email} logged in")
        return user, AuthService.issue_token(user)
    
    @staticmethod
    async def request_otp(email: str, password: str) -> bool:
        """
        Verify credentials, then store a hashed one-time code and email it.
        
        Returns:
            bool: True if the code was delivered
        """
        user = await AuthService.authenticate(email, password)
        
        otp_code = generate_otp()
        now = datetime.utcnow()
        user.otp_hash = get_password_hash(otp_code)
        user.otp_expires_at = now + timedelta(minutes=settings.OTP_EXPIRE_MINUTES)
        user.otp_requested_at = now
        await user.save()
        
        logger.info(f"Issued verification code for {user.email}")
        return await send_otp_email(user.email, otp_code)
    
    @staticmethod
    async def verify_otp(email: str, otp_code: str) -> tuple[User, str]:
        """
        Check a pending one-time code and open a session.
        
        Returns:
            tuple: (user, access_token)
        """
        user = await AuthService.get_user_by_email(email)
        if not user or not user.otp_hash or not user.otp_expires_at:
            raise CredentialsException("No verification code pending")
        
        if user.otp_expires_at < datetime.utcnow():
            raise CredentialsException("Verification code has expired")
        
        if not verify_password(otp_code, user.otp_hash):
            logger.warning(f"Rejected verification code for {user.email}")
            raise CredentialsException("Invalid verification code")
        
        user.otp_hash = None
        user.otp_expires_at = None
        await user.save()
        
        logger.info(f"User {user.email} verified with one-time code")
        return user, AuthService.issue_token(user)
    
    @staticmethod
    def user_to_response(user: User) -> UserResponse:
        return UserResponse(
            id=str(user.id),
            email=user.email,
            name=user.name,
            role=user.role,
            phone=user.phone,
            image=user.image,
            is_active=user.is_active,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
