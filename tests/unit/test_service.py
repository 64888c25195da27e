"""Tests for the individual registration steps."""

import base64
import logging

import pytest
from hypothesis import given, strategies as st

from src.railway.result import failure, success
from src.registration import errors
from src.registration.config import RegistrationConfig
from src.registration.models import User, UserData
from src.registration.service import UserRegistrationService, hash_password


@pytest.fixture
def service() -> UserRegistrationService:
    return UserRegistrationService(RegistrationConfig())


class TestValidateEmail:
    def test_normalizes_case(self, service: UserRegistrationService) -> None:
        assert service.validate_email("TEST@GMAIL.COM") == success("test@gmail.com")

    @pytest.mark.parametrize(
        "email", [None, "", " ", "invalid-email", "a@b", "a b@gmail.com", "test@gmail.com\n"]
    )
    def test_invalid_format(self, service: UserRegistrationService, email: object) -> None:
        assert service.validate_email(email) == failure(errors.INVALID_EMAIL_FORMAT)  # type: ignore[arg-type]

    def test_domain_not_allowed(self, service: UserRegistrationService) -> None:
        result = service.validate_email("test@invalid.domain")
        assert result.error == errors.EMAIL_DOMAIN_NOT_ALLOWED

    def test_configured_domains(self) -> None:
        service = UserRegistrationService(RegistrationConfig(allowed_domains=["example.org"]))
        assert service.validate_email("x@Example.org").value == "x@example.org"
        assert service.validate_email("x@gmail.com").is_failure()


class TestValidatePassword:
    def test_valid(self, service: UserRegistrationService) -> None:
        assert service.validate_password("Pass123!@#") == success("Pass123!@#")

    @pytest.mark.parametrize("password", [None, "", " ", "short", "        "])
    def test_too_short(self, service: UserRegistrationService, password: object) -> None:
        result = service.validate_password(password)  # type: ignore[arg-type]
        assert result.error == errors.PASSWORD_TOO_SHORT

    @pytest.mark.parametrize("password", ["password123", "onlyspecial!", "12345678"])
    def test_missing_requirements(self, service: UserRegistrationService, password: str) -> None:
        result = service.validate_password(password)
        assert result.error == errors.PASSWORD_MISSING_REQUIREMENTS

    def test_configured_minimum_length(self) -> None:
        service = UserRegistrationService(RegistrationConfig(min_password_length=12))
        result = service.validate_password("Pass123!@#")
        assert result.error.code == "PWD_001"
        assert result.error.message == "Password must be at least 12 characters"

    @given(st.text(alphabet="abcXYZ", min_size=6).map(lambda s: s + "1!"))
    def test_digit_and_special_accepted(self, password: str) -> None:
        service = UserRegistrationService(RegistrationConfig())
        assert service.validate_password(password).is_success()


class TestCreateUser:
    def test_creates_and_records(self, service: UserRegistrationService) -> None:
        result = service.create_user(UserData("test@gmail.com", "Pass123!@#"))
        assert result.is_success()
        assert result.value.email == "test@gmail.com"
        assert result.value.hashed_password == hash_password("Pass123!@#")
        assert service.is_registered("TEST@gmail.com")
        assert service.registered_count == 1

    def test_duplicate(self, service: UserRegistrationService) -> None:
        service.create_user(UserData("test@gmail.com", "Pass123!@#"))
        result = service.create_user(UserData("Test@Gmail.com", "Other456$"))
        assert result.error == errors.USER_ALREADY_EXISTS
        assert service.registered_count == 1

    @pytest.mark.parametrize("email,password", [("", "Pass123!@#"), ("a@gmail.com", " ")])
    def test_incomplete_data(
        self, service: UserRegistrationService, email: str, password: str
    ) -> None:
        result = service.create_user(UserData(email, password))
        assert result.error == errors.INVALID_USER_DATA
        assert service.registered_count == 0


class TestHashPassword:
    def test_base64_of_utf8(self) -> None:
        assert hash_password("Pass123!@#") == "UGFzczEyMyFAIw=="

    @given(st.text())
    def test_decodes_back(self, password: str) -> None:
        assert base64.b64decode(hash_password(password)).decode("utf-8") == password


class TestRegisterUserLogging:
    def test_logs_rejection_code(
        self, service: UserRegistrationService, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="src.registration.service"):
            service.register_user("invalid-email", "Pass123!@#")
        assert "EMAIL_001" in caplog.text

    def test_rejection_log_omits_raw_email(
        self, service: UserRegistrationService, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="src.registration.service"):
            service.register_user("Private.Person@unknown.org", "Pass123!@#")
        assert "EMAIL_002" in caplog.text
        assert "Private.Person" not in caplog.text
        assert "unknown.org" not in caplog.text

    def test_logs_registration(
        self, service: UserRegistrationService, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="src.registration.service"):
            service.register_user("test@gmail.com", "Pass123!@#")
        assert "Registered user test@gmail.com" in caplog.text


class TestInjectedSender:
    def test_custom_sender_receives_user(self) -> None:
        received: list[User] = []

        class RecordingSender:
            def send(self, user: User):  # type: ignore[no-untyped-def]
                received.append(user)
                return success(user)

        service = UserRegistrationService(email_sender=RecordingSender())  # type: ignore[arg-type]
        result = service.register_user("test@gmail.com", "Pass123!@#")
        assert result.is_success()
        assert received == [result.value]
