"""
Client-side session cache.

Keeps the tokens, profile and session id returned by the Renovator API
in a persistent key-value store, verifies them on load, refreshes the
access token shortly before it expires, and tears everything down on
logout.
"""

import asyncio
import json
import logging
import secrets
from enum import Enum
from typing import Callable, Optional

import httpx

from renovator.client.api_client import ApiError, RenovatorApiClient
from renovator.client.storage import KeyValueStore
from renovator.client.timer import RefreshTimer, refresh_delay

logger = logging.getLogger(__name__)

TOKENS_KEY = "auth_tokens"
USER_KEY = "auth_user"
SESSION_KEY = "auth_session"
STATE_KEY = "oauth_state"


class AuthState(str, Enum):
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    AUTHENTICATED = "authenticated"
    UNAUTHENTICATED = "unauthenticated"


class SessionCache:
    def __init__(
        self,
        api: RenovatorApiClient,
        store: KeyValueStore,
        tab_store: KeyValueStore,
        navigate: Callable[[str], None],
        logout_timeout: float = 5.0,
    ):
        self.api = api
        self.store = store
        self.tab_store = tab_store
        self.navigate = navigate
        self.logout_timeout = logout_timeout
        self.state = AuthState.UNINITIALIZED
        self.refreshing = False
        self.user: Optional[dict] = None
        self.timer = RefreshTimer()

    @property
    def is_authenticated(self) -> bool:
        return self.state == AuthState.AUTHENTICATED

    @property
    def tokens(self) -> Optional[dict]:
        raw = self.store.get(TOKENS_KEY)
        if raw is None:
            return None
        try:
            tokens = json.loads(raw)
        except ValueError:
            return None
        return tokens if isinstance(tokens, dict) else None

    @property
    def access_token(self) -> Optional[str]:
        tokens = self.tokens
        return tokens.get("accessToken") if tokens else None

    @property
    def session_id(self) -> Optional[str]:
        return self.store.get(SESSION_KEY)

    async def load(self) -> AuthState:
        self.state = AuthState.LOADING
        tokens = self.tokens
        if not tokens or not tokens.get("accessToken"):
            # oauth_state may belong to a login in flight, leave the stores alone
            self.state = AuthState.UNAUTHENTICATED
            return self.state

        user = await self.api.me(tokens["accessToken"])
        if user is not None:
            self._set_user(user)
            self.state = AuthState.AUTHENTICATED
            self._arm(tokens.get("expiresIn", 0))
            return self.state

        try:
            await self._refresh()
        except (ApiError, httpx.HTTPError, KeyError) as e:
            logger.info(f"Stored session could not be restored: {e}")
            self.clear()
        return self.state

    async def login(self, redirect_uri: str) -> str:
        state = secrets.token_hex(32)
        self.tab_store.set(STATE_KEY, state)
        url = await self.api.get_authorization_url(redirect_uri, state)
        self.navigate(url)
        return url

    def accept_login(self, payload: dict) -> None:
        """Store the result of a successful code exchange"""
        self._store_tokens(payload)
        self._set_user(payload["user"])
        self.store.set(SESSION_KEY, payload["sessionId"])
        self.state = AuthState.AUTHENTICATED
        self._arm(payload["expiresIn"])

    async def refresh_token(self) -> None:
        """Refresh now; raises ApiError when the API rejects the refresh token"""
        await self._refresh()

    async def logout(self) -> None:
        access_token = self.access_token
        session_id = self.session_id
        try:
            if access_token:
                await asyncio.wait_for(
                    self.api.logout(access_token, session_id), timeout=self.logout_timeout
                )
        except (asyncio.TimeoutError, ApiError, httpx.HTTPError) as e:
            logger.warning(f"Logout request failed: {e!r}")
        finally:
            self.clear()
            self.navigate("/login")

    def clear(self) -> None:
        self.timer.cancel()
        for key in (TOKENS_KEY, USER_KEY, SESSION_KEY):
            self.store.remove(key)
        self.tab_store.remove(STATE_KEY)
        self.user = None
        self.state = AuthState.UNAUTHENTICATED

    async def _refresh(self) -> None:
        tokens = self.tokens
        if not tokens or not tokens.get("refreshToken"):
            raise ApiError(401, "No refresh token stored")

        self.refreshing = True
        try:
            payload = await self.api.refresh(tokens["refreshToken"])
            self._store_tokens(payload)
            if payload.get("sessionId"):
                self.store.set(SESSION_KEY, payload["sessionId"])
            user = await self.api.me(payload["accessToken"])
            if user is not None:
                self._set_user(user)
            self.state = AuthState.AUTHENTICATED
            self._arm(payload["expiresIn"])
        finally:
            self.refreshing = False

    async def _scheduled_refresh(self) -> None:
        try:
            await self._refresh()
        except (ApiError, httpx.HTTPError, KeyError) as e:
            logger.warning(f"Scheduled token refresh failed, clearing session: {e}")
            self.clear()

    def _arm(self, expires_in: float) -> None:
        self.timer.arm(refresh_delay(expires_in), self._scheduled_refresh)

    def _store_tokens(self, payload: dict) -> None:
        tokens = {
            "accessToken": payload["accessToken"],
            "refreshToken": payload["refreshToken"],
            "expiresIn": payload["expiresIn"],
        }
        self.store.set(TOKENS_KEY, json.dumps(tokens))

    def _set_user(self, user: dict) -> None:
        self.user = user
        self.store.set(USER_KEY, json.dumps(user))
