"""
Refresh Token Use Case

Runs the provider refresh grant and rotates the stored session tokens.
"""

import logging

from renovator.libs.result import Error, Result, Return
from renovator.app.services.identity_provider import IIdentityProvider, UpstreamAuthError
from renovator.app.services.unit_of_work import UnitOfWork
from renovator.domain.entities import expiry_from
from .dtos import RefreshTokenResponse

logger = logging.getLogger(__name__)


class RefreshTokenUseCase:
    """
    Use case for refreshing provider tokens.

    Business Rules:
    - The provider decides whether the refresh token is still good;
      a rejection (including an already rotated token) is INVALID_TOKEN
    - The session holding the old refresh token gets the new tokens and
      a recomputed expiry in one update
    - A session deleted while the refresh was in flight is SESSION_NOT_FOUND
    - Tokens refreshed for a login with no stored session are still returned
    """

    def __init__(self, uow: UnitOfWork, identity_provider: IIdentityProvider):
        self.uow = uow
        self.identity_provider = identity_provider

    async def execute(self, refresh_token: str) -> Result[RefreshTokenResponse]:
        try:
            tokens = await self.identity_provider.refresh_tokens(refresh_token)
        except UpstreamAuthError as exc:
            logger.info(f"Refresh rejected by provider: {exc}")
            return Return.err(Error("INVALID_TOKEN", "Invalid refresh token"))

        async with self.uow:
            session = await self.uow.sessions.get_by_refresh_token(refresh_token)
            session_id = None

            if session is not None:
                updated = await self.uow.sessions.update_tokens(
                    session.id,
                    tokens.access_token,
                    tokens.refresh_token,
                    expiry_from(tokens.expires_in),
                )
                if updated is None:
                    return Return.err(Error("SESSION_NOT_FOUND", "Session not found"))
                session_id = updated.id
                await self.uow.commit()

        return Return.ok(
            RefreshTokenResponse(
                access_token=tokens.access_token,
                refresh_token=tokens.refresh_token,
                expires_in=tokens.expires_in,
                session_id=session_id,
            )
        )
