from fastapi import APIRouter, Depends, status
from sqlalchemy import text

from renovator.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from renovator.depends import get_unit_of_work

router = APIRouter()


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check(uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work)):
    """Liveness plus a trivial database round trip"""
    await uow.session.execute(text("SELECT 1"))
    return {"status": "ok"}
