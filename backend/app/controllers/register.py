"""Terminal stage for ``POST /register``."""

import logging
from typing import Optional

from fastapi import status
from fastapi.responses import JSONResponse
from starlette.responses import Response

from backend.app.core.errors import ConflictError, InternalError
from backend.app.core.pipeline import RequestContext
from backend.app.core.security import get_password_hash
from backend.app.schemas.user import RegisterRequest, UserRead
from backend.app.services.credentials import CredentialStore, IdentifierTakenError

logger = logging.getLogger(__name__)


class RegisterController:
    def __init__(self, store: CredentialStore):
        self.store = store

    def __call__(self, ctx: RequestContext) -> Optional[Response]:
        payload = ctx.payload
        if not isinstance(payload, RegisterRequest):
            logger.error("Register controller reached without a validated payload for %s %s", ctx.method, ctx.path)
            return InternalError().to_response()
        try:
            record = self.store.create(payload.identifier, get_password_hash(payload.secret))
        except IdentifierTakenError:
            return ConflictError().to_response()
        except Exception:
            logger.exception("Registration failed with an internal error")
            return InternalError().to_response()

        logger.info("Registered user_id=%s", record.user_id)
        body = UserRead(id=record.user_id, identifier=record.identifier)
        return JSONResponse(status_code=status.HTTP_201_CREATED, content=body.model_dump())
