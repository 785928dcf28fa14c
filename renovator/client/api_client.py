"""
HTTP client for the Renovator auth endpoints, used by the session cache.
"""

from typing import Optional

import httpx


class ApiError(Exception):
    """Non-success answer from the API"""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        super().__init__(f"{status_code}: {message}")


class RenovatorApiClient:
    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self._transport
        )

    @staticmethod
    def _check(response: httpx.Response) -> dict:
        if response.status_code != 200:
            try:
                message = response.json()["error"]["message"]
            except (ValueError, KeyError, TypeError):
                message = response.reason_phrase
            raise ApiError(response.status_code, message)
        try:
            body = response.json()
        except ValueError:
            raise ApiError(response.status_code, "Response body is not JSON")
        if not isinstance(body, dict):
            raise ApiError(response.status_code, "Unexpected response body")
        return body

    async def get_authorization_url(self, redirect_uri: str, state: str) -> str:
        async with self._client() as client:
            response = await client.get(
                "/api/auth/login", params={"redirect_uri": redirect_uri, "state": state}
            )
        return self._check(response)["authorizationUrl"]

    async def exchange_code(self, code: str, redirect_uri: str) -> dict:
        async with self._client() as client:
            response = await client.get(
                "/api/auth/callback", params={"code": code, "redirect_uri": redirect_uri}
            )
        return self._check(response)

    async def me(self, access_token: str) -> Optional[dict]:
        """Current user, or None when the token is not accepted"""
        try:
            async with self._client() as client:
                response = await client.get(
                    "/api/auth/me", headers={"Authorization": f"Bearer {access_token}"}
                )
        except httpx.HTTPError:
            return None
        if response.status_code != 200:
            return None
        try:
            body = response.json()
        except ValueError:
            return None
        return body if isinstance(body, dict) else None

    async def refresh(self, refresh_token: str) -> dict:
        async with self._client() as client:
            response = await client.post(
                "/api/auth/refresh", json={"refreshToken": refresh_token}
            )
        return self._check(response)

    async def logout(self, access_token: str, session_id: Optional[str]) -> None:
        async with self._client() as client:
            response = await client.post(
                "/api/auth/logout",
                json={"accessToken": access_token, "sessionId": session_id},
            )
        self._check(response)
