"""
Admin API Routes - Maintenance Endpoints

Authentication is via Admin API Key, not user bearer tokens.
"""

from fastapi import APIRouter, Depends, status

from renovator.api.error import raise_for_error
from renovator.api.utils.admin_auth import verify_admin_api_key
from renovator.app.services.unit_of_work import UnitOfWork
from renovator.app.use_cases.sessions import PurgeExpiredResponse, PurgeExpiredSessionsUseCase
from renovator.app.use_cases.work_item_templates import (
    SeedDefaultTemplatesUseCase,
    SeedTemplatesResponse,
)
from renovator.depends import get_unit_of_work

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post(
    "/sessions/purge-expired",
    status_code=status.HTTP_200_OK,
    response_model=PurgeExpiredResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def purge_expired_sessions(uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Purge Expired Sessions

    Same sweep the background sweeper runs, on demand.

    Requires: X-Admin-API-Key header
    """
    result = await PurgeExpiredSessionsUseCase(uow).execute()
    if result.is_err():
        raise_for_error(result.error)
    return result.value


@router.post(
    "/work-item-templates/seed",
    status_code=status.HTTP_200_OK,
    response_model=SeedTemplatesResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def seed_work_item_templates(uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Seed Default Work Item Templates

    No-op (createdCount 0) once defaults exist.

    Requires: X-Admin-API-Key header
    """
    result = await SeedDefaultTemplatesUseCase(uow).execute()
    if result.is_err():
        raise_for_error(result.error)
    return result.value
