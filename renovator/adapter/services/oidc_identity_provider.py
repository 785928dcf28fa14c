"""
OIDC Identity Provider Adapter

Talks to a Keycloak-style realm over HTTP:
  {base}/realms/{realm}/protocol/openid-connect/{auth,token,userinfo,token/introspect,logout}
"""

import logging
from datetime import UTC, datetime
from typing import Optional
from urllib.parse import urlencode

import httpx

from renovator.app.services.identity_provider import (
    IIdentityProvider,
    OAuthTokens,
    TokenValidation,
    UpstreamAuthError,
    UserInfo,
)

logger = logging.getLogger(__name__)


class OidcIdentityProvider(IIdentityProvider):
    """Authorization-code client for an OpenID Connect provider using httpx"""

    def __init__(
        self,
        base_url: str,
        realm: str,
        client_id: str,
        client_secret: str,
        scope: str = "openid email profile",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.client_id = client_id
        self.client_secret = client_secret
        self.scope = scope
        self.timeout = timeout
        self._transport = transport

        realm_url = f"{base_url.rstrip('/')}/realms/{realm}/protocol/openid-connect"
        self.authorization_endpoint = f"{realm_url}/auth"
        self.token_endpoint = f"{realm_url}/token"
        self.userinfo_endpoint = f"{realm_url}/userinfo"
        self.introspection_endpoint = f"{realm_url}/token/introspect"
        self.logout_endpoint = f"{realm_url}/logout"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    def build_authorization_url(self, redirect_uri: str, state: Optional[str] = None) -> str:
        params = {
            "client_id": self.client_id,
            "redirect_uri": redirect_uri,
            "response_type": "code",
            "scope": self.scope,
        }
        if state:
            params["state"] = state
        return f"{self.authorization_endpoint}?{urlencode(params)}"

    async def _post_form(self, url: str, data: dict, action: str) -> dict:
        try:
            async with self._client() as client:
                response = await client.post(url, data=data)
        except httpx.HTTPError as exc:
            raise UpstreamAuthError(f"{action} failed: {exc}") from exc

        if response.status_code != 200:
            raise UpstreamAuthError(
                f"{action} rejected with status {response.status_code}: "
                f"{_error_description(response)}"
            )
        if not response.content:
            return {}
        try:
            payload = response.json()
        except ValueError as exc:
            raise UpstreamAuthError(f"{action} returned a non-JSON body") from exc
        if not isinstance(payload, dict):
            raise UpstreamAuthError(f"{action} returned an unexpected payload")
        return payload

    @staticmethod
    def _tokens(payload: dict) -> OAuthTokens:
        try:
            return OAuthTokens(
                access_token=payload["access_token"],
                refresh_token=payload["refresh_token"],
                expires_in=int(payload["expires_in"]),
                id_token=payload.get("id_token"),
                token_type=payload.get("token_type", "Bearer"),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise UpstreamAuthError(f"Malformed token response: {exc}") from exc

    async def exchange_code(self, code: str, redirect_uri: str) -> OAuthTokens:
        payload = await self._post_form(
            self.token_endpoint,
            {
                "grant_type": "authorization_code",
                "code": code,
                "redirect_uri": redirect_uri,
                "client_id": self.client_id,
                "client_secret": self.client_secret,
            },
            "Code exchange",
        )
        return self._tokens(payload)

    async def refresh_tokens(self, refresh_token: str) -> OAuthTokens:
        payload = await self._post_form(
            self.token_endpoint,
            {
                "grant_type": "refresh_token",
                "refresh_token": refresh_token,
                "client_id": self.client_id,
                "client_secret": self.client_secret,
            },
            "Token refresh",
        )
        return self._tokens(payload)

    async def validate_access_token(self, token: str) -> TokenValidation:
        # Fail closed: an unreachable provider invalidates every token.
        try:
            data = await self._post_form(
                self.introspection_endpoint,
                {
                    "token": token,
                    "client_id": self.client_id,
                    "client_secret": self.client_secret,
                },
                "Token introspection",
            )
        except UpstreamAuthError as exc:
            logger.warning(f"Treating token as invalid: {exc}")
            return TokenValidation(valid=False)

        if not data.get("active"):
            return TokenValidation(valid=False)

        exp = data.get("exp")
        scope = data.get("scope")
        try:
            return TokenValidation(
                valid=True,
                user_id=data.get("sub"),
                expires_at=datetime.fromtimestamp(exp, UTC) if exp else None,
                scopes=scope.split(" ") if scope else None,
            )
        except (TypeError, ValueError, OverflowError, AttributeError) as exc:
            logger.warning(f"Treating token as invalid, malformed introspection: {exc}")
            return TokenValidation(valid=False)

    async def get_user_info(self, access_token: str) -> UserInfo:
        try:
            async with self._client() as client:
                response = await client.get(
                    self.userinfo_endpoint,
                    headers={"Authorization": f"Bearer {access_token}"},
                )
        except httpx.HTTPError as exc:
            raise UpstreamAuthError(f"Userinfo request failed: {exc}") from exc

        if response.status_code != 200:
            raise UpstreamAuthError(
                f"Userinfo rejected with status {response.status_code}: "
                f"{_error_description(response)}"
            )
        try:
            return UserInfo.model_validate(response.json())
        except ValueError as exc:
            raise UpstreamAuthError(f"Malformed userinfo response: {exc}") from exc

    async def revoke_token(self, token: str) -> None:
        await self._post_form(
            self.logout_endpoint,
            {
                "token": token,
                "client_id": self.client_id,
                "client_secret": self.client_secret,
            },
            "Token revocation",
        )


def _error_description(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.reason_phrase
    if isinstance(body, dict):
        return body.get("error_description") or body.get("error") or response.reason_phrase
    return response.reason_phrase
