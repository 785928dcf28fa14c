import asyncio
import json

import httpx
import pytest

from renovator.client import MemoryStore, RenovatorApiClient, SessionCache


class FakeBackend:
    """Scripted stand-in for the /api/auth endpoints"""

    def __init__(self):
        self.valid_access_tokens = {"access-1"}
        self.valid_refresh_tokens = {"refresh-1"}
        self.requests = []
        self.logout_delay = 0.0
        self.expires_in = 900
        self.refresh_body = None

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path == "/api/auth/login":
            state = request.url.params["state"]
            return httpx.Response(200, json={"authorizationUrl": f"https://idp.test/auth?state={state}"})

        if path == "/api/auth/callback":
            if request.url.params["code"] != "good-code":
                return _error(401, "AUTHENTICATION_FAILED", "Authentication failed")
            return httpx.Response(200, json=self._login_body("access-1", "refresh-1"))

        if path == "/api/auth/me":
            token = request.headers.get("Authorization", "").removeprefix("Bearer ")
            if token not in self.valid_access_tokens:
                return _error(401, "UNAUTHORIZED", "Authentication required")
            return httpx.Response(200, json=_user())

        if path == "/api/auth/refresh":
            if self.refresh_body is not None:
                return httpx.Response(200, text=self.refresh_body)
            refresh_token = json.loads(request.content)["refreshToken"]
            if refresh_token not in self.valid_refresh_tokens:
                return _error(401, "INVALID_TOKEN", "Invalid refresh token")
            self.valid_refresh_tokens.discard(refresh_token)
            self.valid_access_tokens.add("access-2")
            self.valid_refresh_tokens.add("refresh-2")
            return httpx.Response(
                200,
                json={
                    "accessToken": "access-2",
                    "refreshToken": "refresh-2",
                    "expiresIn": self.expires_in,
                    "sessionId": "session-1",
                },
            )

        if path == "/api/auth/logout":
            if self.logout_delay:
                await asyncio.sleep(self.logout_delay)
            return httpx.Response(200, json={"message": "Logged out successfully"})

        return httpx.Response(404)

    def _login_body(self, access_token, refresh_token):
        return {
            "accessToken": access_token,
            "refreshToken": refresh_token,
            "expiresIn": self.expires_in,
            "user": _user(),
            "sessionId": "session-1",
        }

    def paths(self):
        return [r.url.path for r in self.requests]


def _user():
    return {"id": "7b0c2f8e-3c8d-4b8e-9a51-2f1f7b6f1c11", "email": "ada@example.com", "firstName": "Ada", "lastName": "L"}


def _error(status_code, code, message):
    return httpx.Response(status_code, json={"error": {"code": code, "message": message}})


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def navigations():
    return []


@pytest.fixture
def cache(backend, navigations):
    api = RenovatorApiClient("http://test", transport=httpx.MockTransport(backend.handler))
    return SessionCache(
        api, MemoryStore(), MemoryStore(), navigations.append, logout_timeout=0.2
    )


@pytest.fixture
def seed_tokens(cache):
    def _seed(access="access-1", refresh="refresh-1", expires_in=900):
        cache.store.set(
            "auth_tokens",
            json.dumps({"accessToken": access, "refreshToken": refresh, "expiresIn": expires_in}),
        )
        cache.store.set("auth_session", "session-1")

    return _seed
