import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from renovator.adapter.services.oidc_identity_provider import OidcIdentityProvider
from renovator.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from renovator.api.error import ClientError
from renovator.app.services.identity_provider import IIdentityProvider
from renovator.app.services.unit_of_work import UnitOfWork
from renovator.app.use_cases.auth import AuthenticateUseCase, UserProfile
from renovator.libs.result import Error

logger = logging.getLogger(__name__)

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

# Missing credentials must produce the uniform 401 below, not FastAPI's 403
security = HTTPBearer(auto_error=False)

identity_provider = OidcIdentityProvider(
    base_url=ApplicationConfig.IDP_URL,
    realm=ApplicationConfig.IDP_REALM,
    client_id=ApplicationConfig.IDP_CLIENT_ID,
    client_secret=ApplicationConfig.IDP_CLIENT_SECRET,
    scope=ApplicationConfig.IDP_SCOPE,
    timeout=ApplicationConfig.IDP_TIMEOUT,
)

UNAUTHORIZED = Error("UNAUTHORIZED", "Authentication required")


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


@asynccontextmanager
async def unit_of_work_scope():
    """Unit of work outside a request, for background jobs"""
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_identity_provider() -> IIdentityProvider:
    return identity_provider


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    uow: UnitOfWork = Depends(get_unit_of_work),
    idp: IIdentityProvider = Depends(get_identity_provider),
) -> UserProfile:
    """
    Dependency resolving the bearer access token to the local user.

    Every failure (missing header, inactive token, unknown user, provider
    outage) yields the same 401 body; the reason is only logged.

    Raises:
        ClientError: 401 UNAUTHORIZED
    """
    if credentials is None or not credentials.credentials:
        logger.info("Rejected request: missing bearer token")
        raise ClientError(UNAUTHORIZED, status_code=status.HTTP_401_UNAUTHORIZED)

    result = await AuthenticateUseCase(uow, idp).execute(credentials.credentials)

    if result.is_err():
        logger.info(f"Rejected request: {result.error.code}")
        raise ClientError(UNAUTHORIZED, status_code=status.HTTP_401_UNAUTHORIZED)

    return result.value
