"""
Authenticate Use Case

Resolves a bearer access token to the local user.
"""

from renovator.libs.result import Error, Result, Return
from renovator.app.services.identity_provider import IIdentityProvider
from renovator.app.services.unit_of_work import UnitOfWork
from .dtos import UserProfile


class AuthenticateUseCase:
    def __init__(self, uow: UnitOfWork, identity_provider: IIdentityProvider):
        self.uow = uow
        self.identity_provider = identity_provider

    async def execute(self, access_token: str) -> Result[UserProfile]:
        validation = await self.identity_provider.validate_access_token(access_token)
        if not validation.valid or not validation.user_id:
            return Return.err(Error("INVALID_TOKEN", "Invalid or expired access token"))

        async with self.uow:
            user = await self.uow.users.get_by_idp_user_id(validation.user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            return Return.ok(UserProfile.model_validate(user))
