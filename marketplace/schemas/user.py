# marketplace/schemas/user.py
import enum
from typing import Optional

from pydantic import ConfigDict, EmailStr, Field, field_validator

from marketplace.schemas.base import CamelModel, RequestModel
from marketplace.schemas.driver import Driver
from marketplace.schemas.vendor import Vendor


class UserRole(str, enum.Enum):
    vendor = "vendor"
    driver = "driver"


class User(CamelModel):
    """Stored user record. ``password`` holds the hash, never the plain text."""
    id: str
    email: str
    password: str
    role: UserRole
    onboarding_complete: bool = False


class UserOut(CamelModel):
    id: str
    email: str
    role: UserRole
    onboarding_complete: bool


class CredentialsRequest(RequestModel):
    """Passwords are taken exactly as typed; only the email is trimmed."""
    model_config = ConfigDict(str_strip_whitespace=False)

    email: EmailStr

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, value):
        return value.strip() if isinstance(value, str) else value


class SignUpRequest(CredentialsRequest):
    password: str = Field(..., min_length=6)
    role: UserRole


class SignInRequest(CredentialsRequest):
    password: str = Field(..., min_length=1)


class UserResponse(CamelModel):
    user: UserOut


class SignInResponse(CamelModel):
    user: UserOut
    vendor: Optional[Vendor] = None
    driver: Optional[Driver] = None
    access_token: str
    token_type: str = "bearer"
