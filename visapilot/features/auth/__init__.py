# Authentication Feature

from visapilot.features.auth.models import User
from visapilot.features.auth.router import router
from visapilot.features.auth.service import AuthService

__all__ = ["User", "router", "AuthService"]
