from __future__ import annotations

from pydantic import BaseModel, Field, ValidationInfo, model_validator
from pydantic.networks import validate_email
from pydantic_core import PydanticCustomError

from authdesk.domain.users.entities import PublicUser

MIN_PASSWORD_LENGTH = 6


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


class SignupRequestDTO(BaseModel):
    name: str | None = Field(None, max_length=100)
    email: str | None = Field(None, max_length=255)
    password: str | None = Field(None, max_length=128)

    @model_validator(mode="after")
    def _validate_signup(self, info: ValidationInfo) -> SignupRequestDTO:
        if _blank(self.name) or _blank(self.email) or not self.password:
            raise PydanticCustomError("missing", "All fields are required", {})

        min_length = MIN_PASSWORD_LENGTH
        if info.context:
            min_length = info.context.get("min_password_length", min_length)
        if len(self.password) < min_length:
            raise PydanticCustomError(
                "password_too_short",
                "Password must be at least {min_length} characters",
                {"min_length": min_length},
            )

        raw_email = self.email.strip()
        try:
            _, address = validate_email(raw_email)
        except PydanticCustomError as exc:
            raise PydanticCustomError("email_invalid", "Invalid email address", {}) from exc
        # "Display Name <addr>" parses too; only a bare address is accepted
        if address.lower() != raw_email.lower():
            raise PydanticCustomError("email_invalid", "Invalid email address", {})

        self.email = address
        return self


class LoginRequestDTO(BaseModel):
    email: str | None = Field(None, max_length=255)
    password: str | None = Field(None, max_length=128)  # No strength check on login

    @model_validator(mode="after")
    def _validate_login(self) -> LoginRequestDTO:
        if _blank(self.email) or not self.password:
            raise PydanticCustomError("missing", "Email and password are required", {})
        return self


class UserDTO(BaseModel):
    id: int
    name: str
    email: str

    @classmethod
    def from_domain(cls, user: PublicUser) -> UserDTO:
        return cls(id=user.id, name=user.name, email=user.email)


class AuthSuccessDTO(BaseModel):
    message: str
    token: str
    user: UserDTO
