"""
Authentication Use Cases

OAuth authorization code login, token refresh, logout and bearer
token authentication.
"""

from .authorization_url_use_case import AuthorizationUrlUseCase
from .oauth_callback_use_case import OAuthCallbackUseCase
from .refresh_token_use_case import RefreshTokenUseCase
from .logout_use_case import LogoutUseCase
from .authenticate_use_case import AuthenticateUseCase
from .dtos import (
    AuthorizationUrlResponse,
    CallbackResponse,
    MessageResponse,
    RefreshTokenResponse,
    UserProfile,
)

__all__ = [
    "AuthorizationUrlUseCase",
    "OAuthCallbackUseCase",
    "RefreshTokenUseCase",
    "LogoutUseCase",
    "AuthenticateUseCase",
    "AuthorizationUrlResponse",
    "CallbackResponse",
    "MessageResponse",
    "RefreshTokenResponse",
    "UserProfile",
]
