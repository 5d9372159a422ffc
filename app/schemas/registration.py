"""Pydantic schema for the registration form."""
from pydantic import BaseModel, Field, field_validator

# Form checkbox value sent by browsers for a ticked box
TERMS_ACCEPTED_MARKER = "on"


class RegistrationForm(BaseModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)
    gender: str = Field(min_length=1)
    age: float = Field(allow_inf_nan=False)
    bio: str | None = None
    referrer: str | None = None
    terms_accepted: bool

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()

    @field_validator("terms_accepted")
    @classmethod
    def must_accept_terms(cls, v: bool) -> bool:
        if not v:
            raise ValueError("terms and conditions not accepted")
        return v

    @field_validator("bio", "referrer", mode="before")
    @classmethod
    def empty_to_none(cls, v):
        return v or None

    @classmethod
    def from_form(cls, terms_and_conditions: str | None = None, **fields) -> "RegistrationForm":
        """Build from raw form fields; only the literal "on" counts as accepted terms."""
        return cls(terms_accepted=terms_and_conditions == TERMS_ACCEPTED_MARKER, **fields)
