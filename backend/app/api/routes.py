from typing import Callable

from backend.app.api import login, register
from backend.app.core.routing import RouteTable, RouteTableBuilder
from backend.app.core.security import create_access_token, token_lifetime_seconds
from backend.app.services.credentials import CredentialStore


def build_route_table(
    store: CredentialStore,
    issue_token: Callable[[int], str] = create_access_token,
    token_lifetime: Callable[[], int] = token_lifetime_seconds,
) -> RouteTable:
    """Register every pipeline route exactly once and freeze the table."""
    builder = RouteTableBuilder()
    login.install(builder, store, issue_token=issue_token, token_lifetime=token_lifetime)
    register.install(builder, store)
    return builder.build()
