"""User registration example built on the railway Result type."""

from src.registration.config import RegistrationConfig, RegistrationPresets
from src.registration.models import User, UserData
from src.registration.service import UserRegistrationService

__all__ = [
    "RegistrationConfig",
    "RegistrationPresets",
    "User",
    "UserData",
    "UserRegistrationService",
]
