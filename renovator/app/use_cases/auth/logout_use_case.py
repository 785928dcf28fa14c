"""
Logout Use Case

Ends the provider session and drops the local session row.
"""

import logging
from typing import Optional
from uuid import UUID

from renovator.libs.result import Result, Return
from renovator.app.services.identity_provider import IIdentityProvider, UpstreamAuthError
from renovator.app.services.unit_of_work import UnitOfWork
from .dtos import MessageResponse

logger = logging.getLogger(__name__)


class LogoutUseCase:
    """
    Use case for logging out.

    Business Rules:
    - Revocation at the provider is best-effort; failures are logged only
    - The local session is deleted whenever an id is given
    - Logging out never fails from the caller's point of view
    """

    def __init__(self, uow: UnitOfWork, identity_provider: IIdentityProvider):
        self.uow = uow
        self.identity_provider = identity_provider

    async def execute(
        self, access_token: Optional[str] = None, session_id: Optional[UUID] = None
    ) -> Result[MessageResponse]:
        if access_token:
            try:
                await self.identity_provider.revoke_token(access_token)
            except UpstreamAuthError as exc:
                logger.warning(f"Token revocation failed, continuing logout: {exc}")

        if session_id is not None:
            async with self.uow:
                await self.uow.sessions.delete_by_id(session_id)
                await self.uow.commit()

        return Return.ok(MessageResponse(message="Logged out successfully"))
