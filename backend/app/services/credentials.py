"""Credential lookup used by the login and registration controllers.

Controllers depend on the ``CredentialStore`` protocol only; the SQLAlchemy
store below is the default implementation wired in by ``create_app``.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from backend.app.core.time import utc_now
from backend.app.models.user import User


class IdentifierTakenError(ValueError):
    """Raised when creating a credential for an identifier that exists."""


@dataclass(frozen=True)
class Credential:
    user_id: int
    identifier: str
    hashed_secret: Optional[str]
    is_active: bool = True


class CredentialStore(Protocol):
    def find_by_identifier(self, identifier: str) -> Optional[Credential]: ...

    def find_by_id(self, user_id: int) -> Optional[Credential]: ...

    def record_login(self, user_id: int) -> None: ...

    def create(self, identifier: str, hashed_secret: str) -> Credential: ...


def _to_credential(user: User) -> Credential:
    return Credential(
        user_id=user.id,
        identifier=user.identifier,
        hashed_secret=user.hashed_password,
        is_active=bool(user.is_active),
    )


class SqlCredentialStore:
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_identifier(self, identifier: str) -> Optional[Credential]:
        with self._session_factory() as db:
            user = db.query(User).filter(User.identifier == identifier).first()
            return _to_credential(user) if user else None

    def find_by_id(self, user_id: int) -> Optional[Credential]:
        with self._session_factory() as db:
            user = db.query(User).filter(User.id == user_id).first()
            return _to_credential(user) if user else None

    def record_login(self, user_id: int) -> None:
        with self._session_factory() as db:
            user = db.query(User).filter(User.id == user_id).first()
            if user is None:
                return
            user.last_login = utc_now()
            db.commit()

    def create(self, identifier: str, hashed_secret: str) -> Credential:
        with self._session_factory() as db:
            if db.query(User).filter(User.identifier == identifier).first():
                raise IdentifierTakenError(identifier)
            user = User(identifier=identifier, hashed_password=hashed_secret)
            db.add(user)
            try:
                db.commit()
            except IntegrityError as exc:
                # Lost a race with a concurrent registration.
                db.rollback()
                raise IdentifierTakenError(identifier) from exc
            db.refresh(user)
            return _to_credential(user)
