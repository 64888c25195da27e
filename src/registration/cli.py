"""CLI interface for the registration pipeline.

Provides command-line access to:
- register: Register a single user and print the outcome as JSON
- demo: Run a scripted series of registrations showing fail-fast behavior
- serve: Start the FastAPI server
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from src.railway.error import Error
from src.railway.result import Result
from src.registration.config import RegistrationConfig
from src.registration.models import User
from src.registration.service import UserRegistrationService


DEMO_REGISTRATIONS = [
    ("TEST@GMAIL.COM", "Pass123!@#"),
    ("invalid-email", "Pass123!@#"),
    ("someone@unknown.org", "Pass123!@#"),
    ("someone@outlook.com", "short"),
    ("someone@company.com", "password123"),
    ("test@gmail.com", "Another1!"),
    ("new.user@company.com", "Complex789&*("),
]


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Railway registration - fail-fast user registration pipeline"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Register command
    register_parser = subparsers.add_parser("register", help="Register a user")
    register_parser.add_argument("email", help="Email address")
    register_parser.add_argument("password", help="Password")
    register_parser.add_argument(
        "--email-service-down",
        action="store_true",
        help="Simulate an unavailable welcome email service",
    )
    register_parser.add_argument(
        "--template-invalid",
        action="store_true",
        help="Simulate a broken welcome email template",
    )

    # Demo command
    subparsers.add_parser("demo", help="Run a scripted demo")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--host", default="0.0.0.0", help="Host")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port")

    args = parser.parse_args()

    if args.command == "register":
        config = RegistrationConfig()
        if args.email_service_down:
            config = config.model_copy(update={"email_service_available": False})
        if args.template_invalid:
            config = config.model_copy(update={"email_template_valid": False})
        sys.exit(run_register(args.email, args.password, config))
    elif args.command == "demo":
        run_demo()
    elif args.command == "serve":
        run_serve(args.host, args.port)
    else:
        parser.print_help()
        sys.exit(1)


def configure_logging(config: RegistrationConfig) -> None:
    logging.basicConfig(
        level=config.log_level.value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def outcome_to_dict(result: Result[User, Error]) -> dict[str, object]:
    """Serialize a registration outcome for JSON output."""
    return result.match(
        lambda user: {
            "status": "registered",
            "email": user.email,
            "created_at": user.created_at.isoformat(),
        },
        lambda error: {
            "status": "rejected",
            "code": error.code,
            "message": error.message,
        },
    )


def run_register(email: str, password: str, config: RegistrationConfig) -> int:
    """Register one user, print the outcome and return the exit code."""
    configure_logging(config)
    service = UserRegistrationService(config)

    result = service.register_user(email, password)
    print(json.dumps(outcome_to_dict(result), indent=2))
    return 0 if result.is_success() else 1


def run_demo() -> None:
    """Run a scripted series of registrations against one service."""
    config = RegistrationConfig()
    configure_logging(config)
    service = UserRegistrationService(config)

    print("=" * 60)
    print("Railway Registration - Demo")
    print("=" * 60)
    print()

    for i, (email, password) in enumerate(DEMO_REGISTRATIONS, 1):
        result = service.register_user(email, password)
        line = result.match(
            lambda user: f"OK    {user.email}",
            lambda error: f"FAIL  {error}",
        )
        print(f"[{i}/{len(DEMO_REGISTRATIONS)}] {email!r}")
        print(f"      {line}")

    print()
    print(f"Registered users: {service.registered_count}")
    print("=" * 60)


def run_serve(host: str, port: int) -> None:
    """Start the FastAPI server."""
    import uvicorn
    uvicorn.run("src.api.app:app", host=host, port=port, reload=True)


if __name__ == "__main__":
    main()
