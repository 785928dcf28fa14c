"""
Authorization URL Use Case

Builds the identity provider redirect for the authorization code flow.
"""

from typing import Optional

from renovator.libs.result import Result, Return
from renovator.app.services.identity_provider import IIdentityProvider
from .dtos import AuthorizationUrlResponse


class AuthorizationUrlUseCase:
    def __init__(self, identity_provider: IIdentityProvider):
        self.identity_provider = identity_provider

    def execute(
        self, redirect_uri: str, state: Optional[str] = None
    ) -> Result[AuthorizationUrlResponse]:
        url = self.identity_provider.build_authorization_url(redirect_uri, state)
        return Return.ok(AuthorizationUrlResponse(authorization_url=url))
