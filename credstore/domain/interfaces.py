from __future__ import annotations
from typing import Optional, Protocol

from .records import UserRecord


class UserRecordStoreProtocol(Protocol):
    async def create(self, record: UserRecord) -> None:
        """Persist a new record.

        Raises UniqueConstraintViolation if the username is taken and
        StorageError for any other backend failure.
        """
        ...

    async def find_by_username(self, username: str) -> Optional[UserRecord]:
        ...
