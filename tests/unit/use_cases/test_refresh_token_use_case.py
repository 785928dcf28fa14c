"""
Unit tests for Refresh Token Use Case
"""

import pytest
from datetime import timedelta
from unittest.mock import AsyncMock
from uuid import uuid4

from renovator.app.services.identity_provider import OAuthTokens, UpstreamAuthError
from renovator.app.use_cases.auth import RefreshTokenUseCase
from renovator.domain.base import utcnow
from renovator.domain.entities import Session


def _session(**overrides):
    values = dict(
        id=uuid4(),
        user_id=uuid4(),
        access_token="access-old",
        refresh_token="refresh-old",
        expires_at=utcnow() + timedelta(minutes=1),
    )
    values.update(overrides)
    return Session(**values)


@pytest.fixture
def new_tokens():
    return OAuthTokens(access_token="access-new", refresh_token="refresh-new", expires_in=600)


@pytest.mark.asyncio
async def test_refresh_rotates_session_tokens(mock_uow, mock_idp, new_tokens):
    session = _session()
    mock_idp.refresh_tokens = AsyncMock(return_value=new_tokens)
    mock_uow.sessions.get_by_refresh_token = AsyncMock(return_value=session)
    mock_uow.sessions.update_tokens = AsyncMock(return_value=session)

    result = await RefreshTokenUseCase(mock_uow, mock_idp).execute("refresh-old")

    assert result.is_ok()
    assert result.value.access_token == "access-new"
    assert result.value.refresh_token == "refresh-new"
    assert result.value.expires_in == 600
    assert result.value.session_id == session.id

    session_id, access, refresh, expires_at = mock_uow.sessions.update_tokens.call_args.args
    assert (session_id, access, refresh) == (session.id, "access-new", "refresh-new")
    assert expires_at > utcnow() + timedelta(seconds=590)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_refresh_rejected_by_provider(mock_uow, mock_idp):
    """A rotated or revoked refresh token fails without touching sessions"""
    mock_idp.refresh_tokens = AsyncMock(side_effect=UpstreamAuthError("invalid_grant"))
    mock_uow.sessions.update_tokens = AsyncMock()

    result = await RefreshTokenUseCase(mock_uow, mock_idp).execute("refresh-old")

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"
    mock_uow.sessions.update_tokens.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_refresh_without_stored_session(mock_uow, mock_idp, new_tokens):
    mock_idp.refresh_tokens = AsyncMock(return_value=new_tokens)
    mock_uow.sessions.get_by_refresh_token = AsyncMock(return_value=None)
    mock_uow.sessions.update_tokens = AsyncMock()

    result = await RefreshTokenUseCase(mock_uow, mock_idp).execute("refresh-old")

    assert result.is_ok()
    assert result.value.session_id is None
    mock_uow.sessions.update_tokens.assert_not_called()


@pytest.mark.asyncio
async def test_refresh_session_deleted_concurrently(mock_uow, mock_idp, new_tokens):
    mock_idp.refresh_tokens = AsyncMock(return_value=new_tokens)
    mock_uow.sessions.get_by_refresh_token = AsyncMock(return_value=_session())
    mock_uow.sessions.update_tokens = AsyncMock(return_value=None)

    result = await RefreshTokenUseCase(mock_uow, mock_idp).execute("refresh-old")

    assert result.is_err()
    assert result.error.code == "SESSION_NOT_FOUND"
    mock_uow.commit.assert_not_called()
