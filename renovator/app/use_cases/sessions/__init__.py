"""
Session Use Cases
"""

from .manage_sessions_use_case import ManageSessionsUseCase
from .purge_expired_sessions_use_case import PurgeExpiredSessionsUseCase
from .dtos import (
    LogoutAllResponse,
    PurgeExpiredResponse,
    SessionResponse,
)

__all__ = [
    "ManageSessionsUseCase",
    "PurgeExpiredSessionsUseCase",
    "LogoutAllResponse",
    "PurgeExpiredResponse",
    "SessionResponse",
]
