"""
Auth repository - registration, credential checks and token issuing.
Challenge: Case-insensitive email identity. Emails are stored lower-cased so the
unique lower(email) index holds even where SQL lower() is ASCII-only (SQLite).
Only the password hash is stored.
"""

import logging
import uuid
from datetime import datetime, timezone

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from indiatrails.config import Settings, get_settings
from indiatrails.core.security import create_access_token, hash_password, verify_password
from indiatrails.db.models.user import User
from indiatrails.db.repositories.base_repository import BaseRepository
from indiatrails.exceptions import UserAlreadyExistsError

logger = logging.getLogger(__name__)


class AuthRepository(BaseRepository[User]):
    def __init__(self, session, settings: Settings | None = None):
        super().__init__(session, User)
        self.settings = settings or get_settings()

    async def get_by_email(self, email: str) -> User | None:
        """Find user by email, ignoring case."""
        result = await self.session.execute(
            select(User).where(func.lower(User.email) == email.lower())
        )
        return result.scalar_one_or_none()

    async def user_exists(self, email: str) -> bool:
        result = await self.session.execute(
            select(User.id).where(func.lower(User.email) == email.lower())
        )
        return result.first() is not None

    async def register(self, user: User, password: str) -> User:
        """Hash the password, lower-case the email, assign id and creation time, persist.

        The unique index on lower(email) rejects a duplicate that raced past
        the caller's user_exists() check.
        """
        user.email = user.email.lower()
        user.password_hash = hash_password(password)
        user.id = uuid.uuid4()
        user.created_at = datetime.now(timezone.utc)
        self.session.add(user)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise UserAlreadyExistsError(user.email) from exc
        logger.info("Registered user %s", user.id)
        return user

    async def login(self, email: str, password: str) -> User | None:
        """Return the user when the credentials match, recording the login time."""
        user = await self.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning("Failed login attempt")
            return None
        user.last_login_at = datetime.now(timezone.utc)
        await self.session.flush()
        return user

    def generate_token(self, user: User) -> str:
        return create_access_token(user.id, user.username, user.email, settings=self.settings)
