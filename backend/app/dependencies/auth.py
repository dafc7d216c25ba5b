"""Authentication dependencies for retrieving the current user."""

from fastapi import Header, HTTPException, Request, status

from backend.app.core.security import decode_access_token
from backend.app.services.credentials import Credential, CredentialStore


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_credential_store(request: Request) -> CredentialStore:
    # Same store the login controller authenticates against.
    return request.app.state.credential_store


def get_current_user(request: Request, authorization: str | None = Header(default=None)) -> Credential:
    # Expect Authorization: Bearer <token>
    if not authorization or not authorization.startswith("Bearer "):
        raise _unauthorized()
    token = authorization.split(" ", 1)[1]
    try:
        payload = decode_access_token(token)
    except ValueError:
        raise _unauthorized()

    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise _unauthorized()

    record = get_credential_store(request).find_by_id(user_id)
    if record is None or not record.is_active:
        raise _unauthorized()
    return record
