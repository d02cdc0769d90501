from __future__ import annotations
import logging
from typing import Dict, Optional

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from .. import models
from .errors import StorageError, UniqueConstraintViolation
from .records import UserRecord

logger = logging.getLogger(__name__)

# Driver-level codes for a duplicate key
PG_UNIQUE_VIOLATION = "23505"
MYSQL_DUPLICATE_ENTRY = 1062
SQLITE_CONSTRAINT_UNIQUE = 2067


def is_unique_violation(exc: IntegrityError) -> bool:
    """Return True if the integrity error was raised by a unique constraint."""
    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate == PG_UNIQUE_VIOLATION:
        return True
    if getattr(orig, "sqlite_errorcode", None) == SQLITE_CONSTRAINT_UNIQUE:
        return True
    args = getattr(orig, "args", ())
    if args and args[0] == MYSQL_DUPLICATE_ENTRY:
        return True
    return "UNIQUE constraint failed" in str(orig)


class SqlAlchemyUserRecordStore:
    def __init__(self, db: Session):
        self.db = db

    async def create(self, record: UserRecord) -> None:
        await run_in_threadpool(self._create, record)

    async def find_by_username(self, username: str) -> Optional[UserRecord]:
        return await run_in_threadpool(self._find_by_username, username)

    def _create(self, record: UserRecord) -> None:
        user = models.User(
            username=record.username,
            password_hash=record.password_hash,
            salt=record.salt,
        )
        try:
            self.db.add(user)
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            if is_unique_violation(exc):
                logger.info("Username %r is already registered", record.username)
                raise UniqueConstraintViolation(record.username) from exc
            logger.exception("Integrity error while creating user %r", record.username)
            raise StorageError("Could not create user record") from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Storage error while creating user %r", record.username)
            raise StorageError("Could not create user record") from exc

    def _find_by_username(self, username: str) -> Optional[UserRecord]:
        try:
            user = self.db.query(models.User).filter(models.User.username == username).first()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Storage error while looking up user %r", username)
            raise StorageError("Could not read user record") from exc
        if user is None:
            return None
        return UserRecord(username=user.username, password_hash=user.password_hash, salt=user.salt)


class InMemoryUserRecordStore:
    """Process-local store keyed by username, for tests and local wiring."""

    def __init__(self) -> None:
        self._records: Dict[str, UserRecord] = {}

    async def create(self, record: UserRecord) -> None:
        if record.username in self._records:
            raise UniqueConstraintViolation(record.username)
        self._records[record.username] = record

    async def find_by_username(self, username: str) -> Optional[UserRecord]:
        return self._records.get(username)

    def __len__(self) -> int:
        return len(self._records)
