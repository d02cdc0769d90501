from fastapi import APIRouter, Depends, status

from . import schemas
from .core.deps import get_credential_store
from .services.credential_store import CredentialStore
from .adapters.auth_adapter import sign_up_api, sign_in_api

router = APIRouter(prefix="/auth", tags=["auth"])


def get_auth_router() -> APIRouter:
    """Return the auth APIRouter for integration into other FastAPI apps.

    Example:

        from fastapi import FastAPI
        from credstore.auth import get_auth_router

        app = FastAPI()
        app.include_router(get_auth_router())
    """
    return router


@router.post("/signup", response_model=schemas.SignUpOut, status_code=status.HTTP_201_CREATED)
async def sign_up(payload: schemas.AuthCredentialsIn, service: CredentialStore = Depends(get_credential_store)):
    await sign_up_api(payload, service)
    return {"message": "User created"}


@router.post("/signin", response_model=schemas.SignInOut)
async def sign_in(payload: schemas.SignInIn, service: CredentialStore = Depends(get_credential_store)):
    # Token issuance is left to the embedding application.
    username = await sign_in_api(payload, service)
    return {"username": username}
