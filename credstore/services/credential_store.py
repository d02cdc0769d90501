from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional

from fastapi.concurrency import run_in_threadpool

from ..core.settings import Settings
from ..domain.errors import (
    DuplicateUsernameError,
    StorageError,
    StorageFailureError,
    UniqueConstraintViolation,
)
from ..domain.interfaces import UserRecordStoreProtocol
from ..domain.records import AuthCredentials, UserRecord
from ..utils import gen_salt, get_password_hash, verify_password

logger = logging.getLogger(__name__)


@dataclass
class CredentialStore:
    user_repo: UserRecordStoreProtocol
    settings: Settings

    async def sign_up(self, credentials: AuthCredentials) -> None:
        """Register a new user with a freshly salted password hash.

        Raises DuplicateUsernameError when the store reports the username as
        taken and StorageFailureError for any other storage failure. The store
        decides uniqueness; there is no lookup before the insert.
        """
        salt = gen_salt(self.settings.BCRYPT_ROUNDS)
        password_hash = await run_in_threadpool(self.hash_password, credentials.password, salt)
        record = UserRecord(username=credentials.username, password_hash=password_hash, salt=salt)
        try:
            await self.user_repo.create(record)
        except UniqueConstraintViolation as exc:
            raise DuplicateUsernameError("Username already exists") from exc
        except StorageError as exc:
            logger.warning("Sign up for %r failed on a storage error", credentials.username)
            raise StorageFailureError("Internal server error") from exc
        logger.info("Registered user %r", credentials.username)

    async def validate_credentials(self, credentials: AuthCredentials) -> Optional[str]:
        """Return the username if the password matches, else None.

        A missing user and a wrong password give the same result.
        """
        try:
            record = await self.user_repo.find_by_username(credentials.username)
        except StorageError as exc:
            logger.warning("Credential lookup for %r failed on a storage error", credentials.username)
            raise StorageFailureError("Internal server error") from exc

        if record is None:
            logger.debug("No match for %r", credentials.username)
            return None

        try:
            matches = await run_in_threadpool(
                verify_password, credentials.password, record.salt, record.password_hash
            )
        except ValueError as exc:
            # bcrypt rejects a malformed stored salt
            logger.warning("Stored record for %r is unreadable", credentials.username)
            raise StorageFailureError("Internal server error") from exc
        if not matches:
            logger.debug("No match for %r", credentials.username)
            return None
        logger.debug("Validated credentials for %r", record.username)
        return record.username

    @staticmethod
    def hash_password(password: str, salt: str) -> str:
        return get_password_hash(password, salt)
