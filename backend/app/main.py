# Login route service entrypoint: FastAPI app with a startup-built route table.

import logging
from typing import Callable, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.app.api import me
from backend.app.api.routes import build_route_table
from backend.app.core.dev_seed import ensure_default_dev_credentials
from backend.app.core.routing import mount_route_table
from backend.app.core.security import create_access_token, token_lifetime_seconds
from backend.app.core.settings import get_settings
from backend.app.db.base import Base
from backend.app.db.session import SessionLocal, engine
from backend.app.services.credentials import CredentialStore, SqlCredentialStore

logger = logging.getLogger(__name__)


def create_app(
    credential_store: Optional[CredentialStore] = None,
    issue_token: Optional[Callable[[int], str]] = None,
    token_lifetime: Optional[Callable[[], int]] = None,
) -> FastAPI:
    """Build the service.

    ``issue_token`` defaults to a signed JWT and ``token_lifetime`` to the
    configured access token lifetime. A custom issuer should come with the
    lifetime of the tokens it issues, which is what ``expires_in`` reports.
    """
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    app = FastAPI(title=settings.app_name, version=settings.api_version)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    store = credential_store if credential_store is not None else SqlCredentialStore(SessionLocal)
    app.state.credential_store = store
    table = build_route_table(
        store,
        issue_token=issue_token or create_access_token,
        token_lifetime=token_lifetime or token_lifetime_seconds,
    )
    mount_route_table(app, table)
    app.include_router(me.router)

    @app.get("/")
    def read_root():
        return {"app": settings.app_name, "status": "ok"}

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    @app.on_event("startup")
    def prepare_database():
        Base.metadata.create_all(bind=engine)
        db = SessionLocal()
        try:
            ensure_default_dev_credentials(db, settings.environment)
        finally:
            db.close()
        logger.info("%s started with %d pipeline route(s)", settings.app_name, len(table))

    return app


app = create_app()
