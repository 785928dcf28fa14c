"""
OAuth redirect handler for the client session cache.
"""

import logging
from typing import Callable, Mapping

import httpx

from renovator.client.api_client import ApiError
from renovator.client.session_cache import STATE_KEY, SessionCache

logger = logging.getLogger(__name__)


class CallbackHandler:
    """Completes a login round-trip. Each instance exchanges at most one code."""

    def __init__(self, cache: SessionCache, redirect_uri: str):
        self.cache = cache
        self.redirect_uri = redirect_uri
        self._handled = False

    @property
    def navigate(self) -> Callable[[str], None]:
        return self.cache.navigate

    async def handle(self, params: Mapping[str, str]) -> bool:
        if self._handled:
            return False
        self._handled = True

        if params.get("error"):
            logger.warning(f"Authorization server returned error: {params.get('error')}")
            self.navigate("/login")
            return False

        code = params.get("code")
        if not code:
            logger.warning("Callback without authorization code")
            self.navigate("/login")
            return False

        expected_state = self.cache.tab_store.get(STATE_KEY)
        if expected_state is None or params.get("state") != expected_state:
            logger.warning("Callback state does not match the stored login state")
            self.navigate("/login")
            return False

        try:
            payload = await self.cache.api.exchange_code(code, self.redirect_uri)
            self.cache.accept_login(payload)
        except (ApiError, httpx.HTTPError, KeyError) as e:
            logger.warning(f"Code exchange failed: {e}")
            self.navigate("/login")
            return False

        self.cache.tab_store.remove(STATE_KEY)
        self.navigate("/dashboard")
        return True
