"""User registration as a railway of validation steps.

``register_user`` runs four steps, each returning ``Result[..., Error]``:

1. validate the email (format, then allowed domain) and lower-case it
2. validate the password (length, then digit + special character)
3. create the user (duplicate check, then completeness) and record it
4. send the welcome email (service availability, then template)

The first failing step's error is returned unchanged and no later step
runs. A user created in step 3 stays registered even if step 4 fails.
"""

from __future__ import annotations

import base64
import logging
import re
from typing import Optional

from src.railway.error import Error
from src.railway.result import Result, returns_result
from src.registration import errors
from src.registration.config import RegistrationConfig
from src.registration.models import User, UserData
from src.registration.notifier import SimulatedEmailSender, WelcomeEmailSender

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")
DIGIT_PATTERN = re.compile(r"[0-9]")
SPECIAL_PATTERN = re.compile(r"[^a-zA-Z0-9]")


def hash_password(password: str) -> str:
    """Simulated hash (base64 of the UTF-8 bytes). Not for real credentials."""
    return base64.b64encode(password.encode("utf-8")).decode("ascii")


class UserRegistrationService:
    """Registers users through a fail-fast chain of validations.

    Usage:
        service = UserRegistrationService()
        result = service.register_user("someone@gmail.com", "Pass123!@#")
        result.match(
            lambda user: print(user.email),
            lambda error: print(error.code),
        )
    """

    def __init__(
        self,
        config: Optional[RegistrationConfig] = None,
        email_sender: Optional[WelcomeEmailSender] = None,
    ) -> None:
        self._config = config or RegistrationConfig()
        self._email_sender = email_sender or SimulatedEmailSender(self._config)
        self._existing_users: set[str] = set()

    @property
    def registered_count(self) -> int:
        """Return the number of registered users."""
        return len(self._existing_users)

    def is_registered(self, email: str) -> bool:
        return email.lower() in self._existing_users

    def register_user(
        self, email: Optional[str], password: Optional[str]
    ) -> Result[User, Error]:
        """Validate, create and welcome a new user.

        Args:
            email: Raw email address; case is normalized.
            password: Raw password.

        Returns:
            Result with the created User, or the first Error encountered.
        """
        result = (
            self.validate_email(email)
            .on_success(
                lambda valid_email: self.validate_password(password).on_success(
                    lambda valid_password: self.create_user(
                        UserData(valid_email, valid_password)
                    )
                )
            )
            .on_success(self._email_sender.send)
        )

        result.match(
            lambda user: logger.info("Registered user %s", user.email),
            lambda error: logger.info("Registration rejected: %s", error.code),
        )
        return result

    @returns_result()
    def validate_email(self, email: Optional[str]) -> Result[str, Error]:
        if email is None or not email.strip() or not EMAIL_PATTERN.fullmatch(email):
            return errors.INVALID_EMAIL_FORMAT  # type: ignore[return-value]

        domain = email.split("@")[1].lower()
        if domain not in self._config.allowed_domains:
            return errors.EMAIL_DOMAIN_NOT_ALLOWED  # type: ignore[return-value]

        return email.lower()  # type: ignore[return-value]

    @returns_result()
    def validate_password(self, password: Optional[str]) -> Result[str, Error]:
        min_length = self._config.min_password_length
        if password is None or not password.strip() or len(password) < min_length:
            return errors.password_too_short(min_length)  # type: ignore[return-value]

        if not DIGIT_PATTERN.search(password) or not SPECIAL_PATTERN.search(password):
            return errors.PASSWORD_MISSING_REQUIREMENTS  # type: ignore[return-value]

        return password  # type: ignore[return-value]

    @returns_result()
    def create_user(self, user_data: UserData) -> Result[User, Error]:
        email = user_data.email.lower()
        if email in self._existing_users:
            return errors.USER_ALREADY_EXISTS  # type: ignore[return-value]

        if not email.strip() or not user_data.password.strip():
            return errors.INVALID_USER_DATA  # type: ignore[return-value]

        user = User(email=email, hashed_password=hash_password(user_data.password))
        self._existing_users.add(email)
        return user  # type: ignore[return-value]
