"""
Identity Provider Port

Application-layer contract for the external OAuth2/OIDC provider.
The adapter layer supplies the HTTP implementation.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class UpstreamAuthError(Exception):
    """The identity provider rejected a request or could not be reached."""


class OAuthTokens(BaseModel):
    """Token set returned by the provider's token endpoint"""

    access_token: str
    refresh_token: str
    expires_in: int
    id_token: Optional[str] = None
    token_type: str = "Bearer"


class TokenValidation(BaseModel):
    """Outcome of token introspection"""

    valid: bool
    user_id: Optional[str] = None
    expires_at: Optional[datetime] = None
    scopes: Optional[List[str]] = None


class UserInfo(BaseModel):
    """Identity claims from the provider's userinfo endpoint"""

    sub: str
    email: str
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None


class IIdentityProvider(ABC):
    """OAuth2 authorization-code client - application layer"""

    @abstractmethod
    def build_authorization_url(self, redirect_uri: str, state: Optional[str] = None) -> str:
        """Provider authorize URL for the authorization code flow"""
        pass

    @abstractmethod
    async def exchange_code(self, code: str, redirect_uri: str) -> OAuthTokens:
        """Exchange an authorization code. Raises UpstreamAuthError on rejection."""
        pass

    @abstractmethod
    async def refresh_tokens(self, refresh_token: str) -> OAuthTokens:
        """Refresh grant. Raises UpstreamAuthError on rejection."""
        pass

    @abstractmethod
    async def validate_access_token(self, token: str) -> TokenValidation:
        """Introspect a token. Never raises: any failure yields valid=False."""
        pass

    @abstractmethod
    async def get_user_info(self, access_token: str) -> UserInfo:
        """Fetch identity claims. Raises UpstreamAuthError on failure."""
        pass

    @abstractmethod
    async def revoke_token(self, token: str) -> None:
        """End the provider session. Raises UpstreamAuthError on failure."""
        pass
