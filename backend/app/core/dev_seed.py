import logging
import os

from sqlalchemy.orm import Session

from backend.app.core.security import get_password_hash
from backend.app.models.user import User

logger = logging.getLogger(__name__)

DEFAULT_DEV_SECRET = "Secret123!"
DEFAULT_DEV_IDENTIFIERS = [
    "dev@localhost",
]


def ensure_default_dev_credentials(db: Session, environment: str) -> None:
    """
    Create default credentials for local development if they do not exist.
    Skips execution outside development and when running under pytest.
    """
    if environment != "development" or os.getenv("PYTEST_CURRENT_TEST"):
        return

    created = False
    for identifier in DEFAULT_DEV_IDENTIFIERS:
        existing = db.query(User).filter(User.identifier == identifier).first()
        if existing:
            continue

        db.add(User(identifier=identifier, hashed_password=get_password_hash(DEFAULT_DEV_SECRET), is_active=True))
        created = True
        logger.info("Seeded development credential %r", identifier)

    if created:
        db.commit()
