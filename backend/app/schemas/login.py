"""Login request and token response schemas."""

from pydantic import BaseModel, Field, field_validator

# bcrypt only hashes the first 72 bytes of a secret.
MAX_SECRET_BYTES = 72


def check_secret_bytes(value: str) -> str:
    if len(value.encode("utf-8")) > MAX_SECRET_BYTES:
        raise ValueError(f"secret must be at most {MAX_SECRET_BYTES} bytes when UTF-8 encoded")
    return value


class LoginRequest(BaseModel):
    """Payload for login attempts."""

    identifier: str = Field(..., min_length=1, max_length=255)
    secret: str = Field(..., min_length=1, max_length=MAX_SECRET_BYTES)

    @field_validator("identifier", mode="before")
    @classmethod
    def strip_identifier(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("secret")
    @classmethod
    def secret_fits_hash(cls, value):
        return check_secret_bytes(value)


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int
