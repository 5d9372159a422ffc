"""Registration errors. Each one maps to an HTTP outcome and an /error indicator."""
from fastapi import status


class RegistrationError(Exception):
    status_code: int = status.HTTP_400_BAD_REQUEST
    # value of /error?message=...; None shows the generic error page
    error_code: str | None = None


class InvalidRegistrationError(RegistrationError):
    """A required field is missing or malformed, or terms were not accepted."""

    def __init__(self, fields: list[str]):
        self.fields = fields
        super().__init__(f"invalid fields: {', '.join(fields)}")


class UserExistsError(RegistrationError):
    status_code = status.HTTP_409_CONFLICT
    error_code = "userexists"

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"user already exists: {email}")


SERVER_ERROR_CODE = "servererror"
