"""
Unit tests for OAuth Callback Use Case
"""

import pytest
from datetime import timedelta
from unittest.mock import AsyncMock
from uuid import uuid4

from renovator.app.services.identity_provider import OAuthTokens, UpstreamAuthError, UserInfo
from renovator.app.use_cases.auth import OAuthCallbackUseCase
from renovator.domain.base import utcnow
from renovator.domain.entities import User


def _tokens(expires_in=300):
    return OAuthTokens(access_token="access-1", refresh_token="refresh-1", expires_in=expires_in)


def _claims():
    return UserInfo(sub="kc-123", email="ada@example.com", given_name="Ada", family_name="Lovelace")


def _passthrough(mock_uow):
    mock_uow.users.get_by_email = AsyncMock(return_value=None)
    mock_uow.users.create = AsyncMock(side_effect=lambda user: user)
    mock_uow.users.update = AsyncMock(side_effect=lambda user: user)
    mock_uow.sessions.create = AsyncMock(side_effect=lambda session: session)


@pytest.mark.asyncio
async def test_callback_creates_user_and_session(mock_uow, mock_idp):
    """First login mirrors the provider identity and opens a session"""
    mock_idp.exchange_code = AsyncMock(return_value=_tokens())
    mock_idp.get_user_info = AsyncMock(return_value=_claims())
    mock_uow.users.get_by_idp_user_id = AsyncMock(return_value=None)
    _passthrough(mock_uow)

    before = utcnow()
    result = await OAuthCallbackUseCase(mock_uow, mock_idp).execute("code-1", "http://app/cb")

    assert result.is_ok()
    response = result.value
    assert response.access_token == "access-1"
    assert response.refresh_token == "refresh-1"
    assert response.expires_in == 300
    assert response.user.email == "ada@example.com"
    assert response.user.first_name == "Ada"

    created_user = mock_uow.users.create.call_args.args[0]
    assert created_user.idp_user_id == "kc-123"
    assert created_user.last_login_at is not None

    session = mock_uow.sessions.create.call_args.args[0]
    assert session.user_id == created_user.id
    assert session.access_token == "access-1"
    assert before + timedelta(seconds=299) <= session.expires_at <= utcnow() + timedelta(seconds=301)
    assert response.session_id == session.id

    mock_idp.exchange_code.assert_called_once_with("code-1", "http://app/cb")
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_callback_updates_existing_user(mock_uow, mock_idp):
    """Returning users keep their id and get fresh profile fields"""
    existing = User(id=uuid4(), idp_user_id="kc-123", email="old@example.com", first_name="Old")
    mock_idp.exchange_code = AsyncMock(return_value=_tokens())
    mock_idp.get_user_info = AsyncMock(return_value=_claims())
    mock_uow.users.get_by_idp_user_id = AsyncMock(return_value=existing)
    _passthrough(mock_uow)

    result = await OAuthCallbackUseCase(mock_uow, mock_idp).execute("code-1", "http://app/cb")

    assert result.is_ok()
    assert result.value.user.id == existing.id
    assert existing.email == "ada@example.com"
    assert existing.first_name == "Ada"
    mock_uow.users.create.assert_not_called()
    mock_uow.users.update.assert_called_once_with(existing)


@pytest.mark.asyncio
async def test_callback_accepts_already_expired_lifetime(mock_uow, mock_idp):
    """A non-positive lifetime still opens a session, already expired"""
    mock_idp.exchange_code = AsyncMock(return_value=_tokens(expires_in=-60))
    mock_idp.get_user_info = AsyncMock(return_value=_claims())
    mock_uow.users.get_by_idp_user_id = AsyncMock(return_value=None)
    _passthrough(mock_uow)

    result = await OAuthCallbackUseCase(mock_uow, mock_idp).execute("code-1", "http://app/cb")

    assert result.is_ok()
    session = mock_uow.sessions.create.call_args.args[0]
    assert session.is_expired()


@pytest.mark.asyncio
async def test_callback_rejected_code(mock_uow, mock_idp):
    """Provider rejection maps to AUTHENTICATION_FAILED without touching storage"""
    mock_idp.exchange_code = AsyncMock(side_effect=UpstreamAuthError("invalid_grant"))

    result = await OAuthCallbackUseCase(mock_uow, mock_idp).execute("bad", "http://app/cb")

    assert result.is_err()
    assert result.error.code == "AUTHENTICATION_FAILED"
    assert "invalid_grant" not in result.error.message
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_callback_userinfo_failure(mock_uow, mock_idp):
    mock_idp.exchange_code = AsyncMock(return_value=_tokens())
    mock_idp.get_user_info = AsyncMock(side_effect=UpstreamAuthError("userinfo down"))

    result = await OAuthCallbackUseCase(mock_uow, mock_idp).execute("code-1", "http://app/cb")

    assert result.is_err()
    assert result.error.code == "AUTHENTICATION_FAILED"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_callback_email_held_by_another_identity(mock_uow, mock_idp):
    """A new sub cannot take over an email that belongs to another user"""
    other = User(id=uuid4(), idp_user_id="kc-999", email="ada@example.com")
    mock_idp.exchange_code = AsyncMock(return_value=_tokens())
    mock_idp.get_user_info = AsyncMock(return_value=_claims())
    _passthrough(mock_uow)
    mock_uow.users.get_by_email = AsyncMock(return_value=other)

    result = await OAuthCallbackUseCase(mock_uow, mock_idp).execute("code-1", "http://app/cb")

    assert result.is_err()
    assert result.error.code == "AUTHENTICATION_FAILED"
    mock_uow.users.create.assert_not_called()
    mock_uow.sessions.create.assert_not_called()
    mock_uow.commit.assert_not_called()
