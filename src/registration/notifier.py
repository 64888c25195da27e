"""Welcome email senders with dependency injection for tests and demos.

Only a simulated sender ships here; a real SMTP or API-backed sender plugs
in by implementing ``WelcomeEmailSender``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from src.railway.error import Error
from src.railway.result import Result, returns_result
from src.registration import errors
from src.registration.config import RegistrationConfig
from src.registration.models import User

logger = logging.getLogger(__name__)


class WelcomeEmailSender(ABC):
    """Abstract welcome email sender."""

    @abstractmethod
    def send(self, user: User) -> Result[User, Error]:
        """Send the welcome email, returning the user on success."""
        ...


class SimulatedEmailSender(WelcomeEmailSender):
    """Records sends in memory instead of delivering mail.

    Availability is checked before the template, so an unavailable service
    is reported even when the template is also broken.
    """

    def __init__(self, config: Optional[RegistrationConfig] = None) -> None:
        self._config = config or RegistrationConfig()
        self.sent: list[str] = []

    @returns_result()
    def send(self, user: User) -> Result[User, Error]:  # type: ignore[override]
        if not self._config.email_service_available:
            return errors.EMAIL_SERVICE_UNAVAILABLE  # type: ignore[return-value]

        if not self._config.email_template_valid:
            return errors.EMAIL_TEMPLATE_INVALID  # type: ignore[return-value]

        self.sent.append(user.email)
        logger.info("Welcome email sent to %s", user.email)
        return user  # type: ignore[return-value]
