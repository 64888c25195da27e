"""Registration pipeline example.

Registers a few users, including ones that fail at different steps, and
shows that the welcome email is only sent for complete registrations.

Usage:
    python examples/registration_demo.py
"""

from src.registration.config import RegistrationConfig
from src.registration.notifier import SimulatedEmailSender
from src.registration.service import UserRegistrationService


def main() -> None:
    config = RegistrationConfig(allowed_domains=["gmail.com", "example.com"])
    sender = SimulatedEmailSender(config)
    service = UserRegistrationService(config, email_sender=sender)

    attempts = [
        ("Alice@Example.com", "Wonder1and!"),
        ("bob@unknown.net", "Builder42!"),
        ("carol@gmail.com", "weak"),
        ("alice@example.com", "Different9?"),
    ]

    for email, password in attempts:
        result = service.register_user(email, password)
        if result.is_success():
            print(f"registered {result.value.email}")  # type: ignore[union-attr]
        else:
            print(f"rejected {email}: {result.error}")

    print(f"welcome emails sent: {sender.sent}")


if __name__ == "__main__":
    main()
