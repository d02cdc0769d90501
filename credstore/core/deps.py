from __future__ import annotations
from fastapi import Depends
from sqlalchemy.orm import Session

from .settings import settings, Settings
from ..database import get_db
from ..domain.repositories import SqlAlchemyUserRecordStore
from ..domain.interfaces import UserRecordStoreProtocol
from ..services.credential_store import CredentialStore


def get_settings() -> Settings:
    return settings


def get_user_record_store(db: Session = Depends(get_db)) -> UserRecordStoreProtocol:
    return SqlAlchemyUserRecordStore(db)


def get_credential_store(
    user_repo: UserRecordStoreProtocol = Depends(get_user_record_store),
    cfg: Settings = Depends(get_settings),
) -> CredentialStore:
    return CredentialStore(user_repo=user_repo, settings=cfg)
