"""
Unit tests for Logout and Authenticate Use Cases
"""

import pytest
from unittest.mock import AsyncMock
from uuid import uuid4

from renovator.app.services.identity_provider import TokenValidation, UpstreamAuthError
from renovator.app.use_cases.auth import AuthenticateUseCase, LogoutUseCase
from renovator.domain.entities import User


@pytest.mark.asyncio
async def test_logout_revokes_and_deletes_session(mock_uow, mock_idp):
    session_id = uuid4()
    mock_idp.revoke_token = AsyncMock()
    mock_uow.sessions.delete_by_id = AsyncMock(return_value=True)

    result = await LogoutUseCase(mock_uow, mock_idp).execute("access-1", session_id)

    assert result.is_ok()
    assert result.value.message == "Logged out successfully"
    mock_idp.revoke_token.assert_called_once_with("access-1")
    mock_uow.sessions.delete_by_id.assert_called_once_with(session_id)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_logout_survives_revocation_failure(mock_uow, mock_idp):
    """Provider outage is logged, the local session still goes"""
    session_id = uuid4()
    mock_idp.revoke_token = AsyncMock(side_effect=UpstreamAuthError("down"))
    mock_uow.sessions.delete_by_id = AsyncMock(return_value=True)

    result = await LogoutUseCase(mock_uow, mock_idp).execute("access-1", session_id)

    assert result.is_ok()
    mock_uow.sessions.delete_by_id.assert_called_once_with(session_id)


@pytest.mark.asyncio
async def test_logout_without_anything(mock_uow, mock_idp):
    mock_idp.revoke_token = AsyncMock()
    mock_uow.sessions.delete_by_id = AsyncMock()

    result = await LogoutUseCase(mock_uow, mock_idp).execute(None, None)

    assert result.is_ok()
    mock_idp.revoke_token.assert_not_called()
    mock_uow.sessions.delete_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_authenticate_resolves_local_user(mock_uow, mock_idp):
    user = User(id=uuid4(), idp_user_id="kc-1", email="ada@example.com", first_name="Ada")
    mock_idp.validate_access_token = AsyncMock(return_value=TokenValidation(valid=True, user_id="kc-1"))
    mock_uow.users.get_by_idp_user_id = AsyncMock(return_value=user)

    result = await AuthenticateUseCase(mock_uow, mock_idp).execute("access-1")

    assert result.is_ok()
    assert result.value.id == user.id
    assert result.value.email == "ada@example.com"
    mock_uow.users.get_by_idp_user_id.assert_called_once_with("kc-1")


@pytest.mark.asyncio
async def test_authenticate_inactive_token(mock_uow, mock_idp):
    mock_idp.validate_access_token = AsyncMock(return_value=TokenValidation(valid=False))
    mock_uow.users.get_by_idp_user_id = AsyncMock()

    result = await AuthenticateUseCase(mock_uow, mock_idp).execute("expired")

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"
    mock_uow.users.get_by_idp_user_id.assert_not_called()


@pytest.mark.asyncio
async def test_authenticate_unknown_user(mock_uow, mock_idp):
    """Valid token for a subject that never completed the callback"""
    mock_idp.validate_access_token = AsyncMock(return_value=TokenValidation(valid=True, user_id="kc-9"))
    mock_uow.users.get_by_idp_user_id = AsyncMock(return_value=None)

    result = await AuthenticateUseCase(mock_uow, mock_idp).execute("access-1")

    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"
