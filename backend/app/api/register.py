"""Handles user registration for the login service."""

from backend.app.controllers.register import RegisterController
from backend.app.core.routing import RouteTableBuilder
from backend.app.middlewares.validate import validate
from backend.app.schemas.user import RegisterRequest
from backend.app.services.credentials import CredentialStore


def install(builder: RouteTableBuilder, store: CredentialStore) -> RouteTableBuilder:
    return builder.post("/register", validate(RegisterRequest), RegisterController(store), name="register")
