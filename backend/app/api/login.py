"""Login route registration."""

from typing import Callable

from backend.app.controllers.login import LoginController
from backend.app.core.routing import RouteTableBuilder
from backend.app.core.security import create_access_token, token_lifetime_seconds
from backend.app.middlewares.validate import validate
from backend.app.schemas.login import LoginRequest
from backend.app.services.credentials import CredentialStore


def install(
    builder: RouteTableBuilder,
    store: CredentialStore,
    issue_token: Callable[[int], str] = create_access_token,
    token_lifetime: Callable[[], int] = token_lifetime_seconds,
) -> RouteTableBuilder:
    controller = LoginController(store, issue_token=issue_token, token_lifetime=token_lifetime)
    return builder.post("/login", validate(LoginRequest), controller, name="login")
