from fastapi import HTTPException, status

from .. import schemas
from ..services.credential_store import CredentialStore
from ..domain.errors import (
    DuplicateUsernameError,
    PasswordPolicyError,
    StorageFailureError,
)
from ..domain.records import AuthCredentials


def _to_credentials(payload: schemas.AuthCredentialsIn | schemas.SignInIn) -> AuthCredentials:
    return AuthCredentials(username=payload.username, password=payload.password)


async def sign_up_api(payload: schemas.AuthCredentialsIn, service: CredentialStore) -> None:
    try:
        await service.sign_up(_to_credentials(payload))
    except DuplicateUsernameError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except PasswordPolicyError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StorageFailureError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error")


async def sign_in_api(payload: schemas.SignInIn, service: CredentialStore) -> str:
    try:
        username = await service.validate_credentials(_to_credentials(payload))
    except StorageFailureError:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error")

    if username is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return username
