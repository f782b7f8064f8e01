# Profile Feature - Service

from pydantic import EmailStr, TypeAdapter, ValidationError

from visapilot.core.logging import logger
from visapilot.core.security import get_password_hash, verify_password
from visapilot.features.auth.models import User
from visapilot.features.profile.schemas import ChangePasswordRequest, UpdateProfileRequest
from visapilot.shared.exceptions import BadRequestException
from visapilot.shared.schemas import clean_optional


MIN_PASSWORD_LENGTH = 6

_email_adapter = TypeAdapter(EmailStr)


class ProfileService:
    """Self-service changes to the signed-in user's account."""
    
    @staticmethod
    async def update_profile(user: User, request: UpdateProfileRequest) -> User:
        name = clean_optional(request.name)
        email = clean_optional(request.email)
        if not name or not email:
            raise BadRequestException("Name and email are required")
        
        try:
            email = _email_adapter.validate_python(email).lower()
        except ValidationError:
            raise BadRequestException("Invalid email address")
        
        existing = await User.find_one(User.email == email)
        if existing and existing.id != user.id:
            raise BadRequestException("Email is already taken")
        
        user.name = name
        user.email = email
        user.phone = clean_optional(request.phone)
        user.update_timestamp()
        await user.save()
        
        logger.info(f"Updated profile for user {user.id}")
        return user
    
    @staticmethod
    async def change_password(user: User, request: ChangePasswordRequest) -> None:
        """
        Replace the user's password after checking the current one.
        
        Raises:
            BadRequestException: Missing fields, short new password or
                a current password that does not verify
        """
        if not request.current_password or not request.new_password:
            raise BadRequestException("Current password and new password are required")
        
        if len(request.new_password) < MIN_PASSWORD_LENGTH:
            raise BadRequestException(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")
        
        if not user.password_hash or not verify_password(request.current_password, user.password_hash):
            logger.warning(f"Rejected password change for user {user.id}")
            raise BadRequestException("Current password is incorrect")
        
        user.password_hash = get_password_hash(request.new_password)
        user.update_timestamp()
        await user.save()
        
        logger.info(f"Password changed for user {user.id}")
