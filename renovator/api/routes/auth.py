from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import Field

from renovator.api.error import ClientError, ServerError
from renovator.app.services.identity_provider import IIdentityProvider
from renovator.app.services.unit_of_work import UnitOfWork
from renovator.app.use_cases.auth import (
    AuthorizationUrlResponse,
    AuthorizationUrlUseCase,
    CallbackResponse,
    LogoutUseCase,
    MessageResponse,
    OAuthCallbackUseCase,
    RefreshTokenResponse,
    RefreshTokenUseCase,
    UserProfile,
)
from renovator.app.use_cases.dtos import CamelModel
from renovator.depends import get_current_user, get_identity_provider, get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.get("/login", status_code=status.HTTP_200_OK, response_model=AuthorizationUrlResponse)
async def login(
    redirect_uri: str = Query(..., min_length=1),
    state: Optional[str] = Query(None),
    idp: IIdentityProvider = Depends(get_identity_provider),
):
    """
    Start OAuth Login

    Returns the identity provider URL the client should navigate to.
    The client generates `state` and checks it again on the callback.
    """
    result = AuthorizationUrlUseCase(idp).execute(redirect_uri, state)
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.get("/callback", status_code=status.HTTP_200_OK, response_model=CallbackResponse)
async def callback(
    code: str = Query(..., min_length=1),
    redirect_uri: str = Query(..., min_length=1),
    uow: UnitOfWork = Depends(get_unit_of_work),
    idp: IIdentityProvider = Depends(get_identity_provider),
):
    """
    OAuth Callback

    Exchanges the authorization code, creates or refreshes the local user
    and opens a new session.

    Raises:
        - 401 Unauthorized: AUTHENTICATION_FAILED (code rejected by the provider)
        - 422 Unprocessable Entity: Missing code or redirect_uri
    """
    result = await OAuthCallbackUseCase(uow, idp).execute(code, redirect_uri)

    if result.is_err():
        error = result.error
        if error.code == "AUTHENTICATION_FAILED":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value


@router.get("/me", status_code=status.HTTP_200_OK, response_model=UserProfile)
async def me(current_user: UserProfile = Depends(get_current_user)):
    """Current user profile, 401 for any authentication failure"""
    return current_user


class RefreshRequest(CamelModel):
    refresh_token: str = Field(..., min_length=1)


@router.post("/refresh", status_code=status.HTTP_200_OK, response_model=RefreshTokenResponse)
async def refresh(
    request: RefreshRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    idp: IIdentityProvider = Depends(get_identity_provider),
):
    """
    Refresh Tokens

    Raises:
        - 401 Unauthorized: INVALID_TOKEN (rejected or already rotated refresh token)
        - 401 Unauthorized: SESSION_NOT_FOUND (session removed during the refresh)
    """
    result = await RefreshTokenUseCase(uow, idp).execute(request.refresh_token)

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_TOKEN", "SESSION_NOT_FOUND"):
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value


class LogoutRequest(CamelModel):
    access_token: Optional[str] = None
    session_id: Optional[UUID] = None


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def logout(
    request: LogoutRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    idp: IIdentityProvider = Depends(get_identity_provider),
):
    """Best-effort logout; always answers 200"""
    result = await LogoutUseCase(uow, idp).execute(request.access_token, request.session_id)
    if result.is_err():
        raise ServerError(result.error)
    return result.value
