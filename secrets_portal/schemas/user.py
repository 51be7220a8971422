# File: secrets_portal/schemas/user.py

from pydantic import BaseModel, Field

from secrets_portal.models.user import EMAIL_MAX_LENGTH
from secrets_portal.services.auth_service import AuthOutcome


class UserCredentials(BaseModel):
    # Plain str, not EmailStr: the email is stored and matched exactly as typed
    email: str = Field(min_length=1, max_length=EMAIL_MAX_LENGTH)
    password: str = Field(min_length=1)


class AuthResult(BaseModel):
    outcome: AuthOutcome
    message: str

    @classmethod
    def from_outcome(cls, outcome: AuthOutcome) -> "AuthResult":
        return cls(outcome=outcome, message=outcome.message)
