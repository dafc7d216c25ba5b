"""Terminal stage for ``POST /login``."""

import logging
from typing import Callable, Optional

from fastapi import status
from fastapi.responses import JSONResponse
from starlette.responses import Response

from backend.app.core.errors import AuthenticationError, InternalError
from backend.app.core.pipeline import RequestContext
from backend.app.core.security import create_access_token, dummy_verify, token_lifetime_seconds, verify_password
from backend.app.schemas.login import LoginRequest, TokenResponse
from backend.app.services.credentials import CredentialStore

logger = logging.getLogger(__name__)


class LoginController:
    """Authenticate validated credentials and issue one access token.

    Unknown identifiers, wrong secrets, inactive accounts and accounts without
    a stored hash all produce the same 401 body. Any other failure is logged
    and answered with a generic 500.

    ``token_lifetime`` returns the lifetime in seconds of tokens produced by
    ``issue_token``; it is reported as ``expires_in``.
    """

    def __init__(
        self,
        store: CredentialStore,
        issue_token: Callable[[int], str] = create_access_token,
        verifier: Callable[[str, str], bool] = verify_password,
        token_lifetime: Callable[[], int] = token_lifetime_seconds,
    ):
        self.store = store
        self.issue_token = issue_token
        self.verifier = verifier
        self.token_lifetime = token_lifetime

    def __call__(self, ctx: RequestContext) -> Optional[Response]:
        credentials = ctx.payload
        if not isinstance(credentials, LoginRequest):
            logger.error("Login controller reached without a validated payload for %s %s", ctx.method, ctx.path)
            return InternalError().to_response()
        try:
            return self._login(credentials)
        except AuthenticationError as exc:
            # Identifiers are not logged; users sometimes type secrets into them.
            logger.info("Rejected login attempt")
            return exc.to_response()
        except Exception:
            logger.exception("Login failed with an internal error")
            return InternalError().to_response()

    def _login(self, credentials: LoginRequest) -> Response:
        record = self.store.find_by_identifier(credentials.identifier)
        if record is None or not record.hashed_secret:
            dummy_verify()
            raise AuthenticationError()
        if not self.verifier(credentials.secret, record.hashed_secret):
            raise AuthenticationError()
        if not record.is_active:
            raise AuthenticationError()

        self.store.record_login(record.user_id)
        token = self.issue_token(record.user_id)
        logger.info("Issued access token for user_id=%s", record.user_id)
        body = TokenResponse(access_token=token, expires_in=self.token_lifetime())
        return JSONResponse(status_code=status.HTTP_200_OK, content=body.model_dump())
