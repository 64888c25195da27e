"""Error catalogue for the user-registration pipeline."""

from src.railway.error import Error

# Email validation
INVALID_EMAIL_FORMAT = Error("EMAIL_001", "Email format is invalid")
EMAIL_DOMAIN_NOT_ALLOWED = Error("EMAIL_002", "Email domain is not allowed")


# Password validation
def password_too_short(min_length: int = 8) -> Error:
    return Error("PWD_001", f"Password must be at least {min_length} characters")


PASSWORD_TOO_SHORT = password_too_short()
PASSWORD_MISSING_REQUIREMENTS = Error(
    "PWD_002", "Password must contain at least one number and one special character"
)

# User creation
USER_ALREADY_EXISTS = Error("USER_001", "User with this email already exists")
INVALID_USER_DATA = Error("USER_002", "User data is incomplete or invalid")

# Notification
EMAIL_SERVICE_UNAVAILABLE = Error("NOTIFY_001", "Email service is currently unavailable")
EMAIL_TEMPLATE_INVALID = Error("NOTIFY_002", "Welcome email template is invalid")
