from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from renovator.api.error import raise_for_error
from renovator.app.services.unit_of_work import UnitOfWork
from renovator.app.use_cases.auth import MessageResponse, UserProfile
from renovator.app.use_cases.sessions import (
    LogoutAllResponse,
    ManageSessionsUseCase,
    SessionResponse,
)
from renovator.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/sessions", tags=["Sessions"])


@router.get("", status_code=status.HTTP_200_OK, response_model=List[SessionResponse])
async def list_sessions(
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Caller's sessions, newest first"""
    result = await ManageSessionsUseCase(uow).list_sessions(current_user.id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post("/logout-all", status_code=status.HTTP_200_OK, response_model=LogoutAllResponse)
async def logout_all(
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Delete every session of the caller, including the current one"""
    result = await ManageSessionsUseCase(uow).logout_all(current_user.id)
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.delete("/{session_id}", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def delete_session(
    session_id: UUID,
    current_user: UserProfile = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete One Session

    Raises:
        - 404 Not Found: SESSION_NOT_FOUND (missing or owned by someone else)
    """
    result = await ManageSessionsUseCase(uow).delete_session(session_id, current_user.id)
    if result.is_err():
        raise_for_error(result.error)
    return MessageResponse(message="Session revoked successfully")
