"""User schemas used for registration and responses."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from backend.app.schemas.login import MAX_SECRET_BYTES, check_secret_bytes


class RegisterRequest(BaseModel):
    identifier: str = Field(..., min_length=1, max_length=255)
    secret: str = Field(..., min_length=8, max_length=MAX_SECRET_BYTES)

    @field_validator("identifier", mode="before")
    @classmethod
    def strip_identifier(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("secret")
    @classmethod
    def secret_fits_hash(cls, value):
        return check_secret_bytes(value)


class UserRead(BaseModel):
    id: int
    identifier: str

    model_config = ConfigDict(from_attributes=True)
