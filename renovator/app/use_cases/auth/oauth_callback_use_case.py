"""
OAuth Callback Use Case

Exchanges an authorization code for provider tokens, mirrors the
provider identity into the local users table and opens a session.
"""

import logging
from uuid import UUID

from renovator.libs.result import Error, Result, Return
from renovator.app.services.identity_provider import (
    IIdentityProvider,
    OAuthTokens,
    UpstreamAuthError,
    UserInfo,
)
from renovator.app.services.unit_of_work import UnitOfWork
from renovator.domain.base import utcnow
from renovator.domain.entities import Session, User, expiry_from
from .dtos import CallbackResponse, UserProfile

logger = logging.getLogger(__name__)


class OAuthCallbackUseCase:
    """
    Use case for completing an OAuth login.

    Business Rules:
    - A code rejected by the provider fails with AUTHENTICATION_FAILED,
      provider details are only logged
    - Users are reconciled by the provider's `sub` claim
    - Every successful callback opens a new session; existing sessions
      of the same user are left alone
    - An email already held by a different provider identity fails with
      AUTHENTICATION_FAILED instead of merging the accounts
    """

    def __init__(self, uow: UnitOfWork, identity_provider: IIdentityProvider):
        self.uow = uow
        self.identity_provider = identity_provider

    async def execute(self, code: str, redirect_uri: str) -> Result[CallbackResponse]:
        try:
            tokens = await self.identity_provider.exchange_code(code, redirect_uri)
            claims = await self.identity_provider.get_user_info(tokens.access_token)
        except UpstreamAuthError as exc:
            logger.warning(f"OAuth callback rejected: {exc}")
            return Return.err(Error("AUTHENTICATION_FAILED", "Authentication failed"))

        async with self.uow:
            owner = await self.uow.users.get_by_email(claims.email)
            if owner is not None and owner.idp_user_id != claims.sub:
                logger.warning(
                    f"OAuth callback rejected: email of sub {claims.sub} belongs to user {owner.id}"
                )
                return Return.err(Error("AUTHENTICATION_FAILED", "Authentication failed"))

            user = await self.resolve_user(claims)
            session = await self.create_session(user.id, tokens)
            await self.uow.commit()

            logger.info(f"User {user.id} logged in with session {session.id}")

            return Return.ok(
                CallbackResponse(
                    access_token=tokens.access_token,
                    refresh_token=tokens.refresh_token,
                    expires_in=tokens.expires_in,
                    user=UserProfile.model_validate(user),
                    session_id=session.id,
                )
            )

    async def resolve_user(self, claims: UserInfo) -> User:
        """
        Create or update the local user for a set of provider claims.

        Must be called inside the unit of work. Repeating the same claims
        keeps a single row.
        """
        user = await self.uow.users.get_by_idp_user_id(claims.sub)

        if user is None:
            user = User(
                idp_user_id=claims.sub,
                email=claims.email,
                first_name=claims.given_name or "",
                last_name=claims.family_name or "",
                phone=claims.phone,
                company=claims.company,
                last_login_at=utcnow(),
            )
            return await self.uow.users.create(user)

        user.email = claims.email
        user.first_name = claims.given_name or ""
        user.last_name = claims.family_name or ""
        user.phone = claims.phone
        user.company = claims.company
        user.last_login_at = utcnow()
        return await self.uow.users.update(user)

    async def create_session(self, user_id: UUID, tokens: OAuthTokens) -> Session:
        """Persist a session for freshly issued tokens. Must be called inside the unit of work."""
        session = Session(
            user_id=user_id,
            access_token=tokens.access_token,
            refresh_token=tokens.refresh_token,
            expires_at=expiry_from(tokens.expires_in),
        )
        return await self.uow.sessions.create(session)
