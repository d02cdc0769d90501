from .main import create_app, app
from .auth import router as auth_router
from .services.credential_store import CredentialStore
from .domain.records import AuthCredentials, UserRecord
from .core.settings import settings, Settings

__all__ = [
    "create_app",
    "app",
    "auth_router",
    "CredentialStore",
    "AuthCredentials",
    "UserRecord",
    "settings",
    "Settings",
]
