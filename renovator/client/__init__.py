from .api_client import ApiError, RenovatorApiClient
from .callback import CallbackHandler
from .session_cache import AuthState, SessionCache
from .storage import JsonFileStore, KeyValueStore, MemoryStore
from .timer import RefreshTimer, refresh_delay

__all__ = [
    "ApiError",
    "AuthState",
    "CallbackHandler",
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "RefreshTimer",
    "RenovatorApiClient",
    "SessionCache",
    "refresh_delay",
]
