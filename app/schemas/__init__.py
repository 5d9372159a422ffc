from app.schemas.registration import TERMS_ACCEPTED_MARKER, RegistrationForm

__all__ = ["RegistrationForm", "TERMS_ACCEPTED_MARKER"]
