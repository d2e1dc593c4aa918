"""
Investor reconciliation router - preview and apply client company links.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import get_active_user
from app.db.session import get_db
from app.errors import raise_app_error
from app.models.profile import Profile
from app.schemas.investor_reconciliation import (
    ApplyOutcome,
    ApplyRequest,
    ReconciliationPreview,
)
from app.services.investor_reconciliation_service import InvestorReconciliationService
from app.services.reconciliation.errors import (
    DatastoreError,
    ReconciliationAuthorizationError,
    ReconciliationValidationError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/fundops_investors_reconcile", tags=["investor-reconciliation"])


def _raise_for(exc: Exception) -> None:
    if isinstance(exc, ReconciliationValidationError):
        raise_app_error(400, "INVALID_REQUEST", str(exc))
    if isinstance(exc, ReconciliationAuthorizationError):
        raise_app_error(403, "FORBIDDEN", str(exc), {"company_id": exc.company_id})
    raise_app_error(500, "DATASTORE_ERROR", str(exc))


@router.get("/preview", response_model=ReconciliationPreview)
async def preview_reconciliation(
    company_id: Optional[str] = Query(None),
    current_user: Profile = Depends(get_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Classify every investor of a company against the company catalog. Read-only."""
    service = InvestorReconciliationService(db)
    try:
        return await service.preview(current_user, company_id)
    except (ReconciliationValidationError, ReconciliationAuthorizationError, DatastoreError) as exc:
        _raise_for(exc)


@router.post("/apply", response_model=ApplyOutcome, response_model_exclude_none=True)
async def apply_reconciliation(
    request: ApplyRequest,
    current_user: Profile = Depends(get_active_user),
    db: AsyncSession = Depends(get_db),
):
    """Persist selected investor to company links."""
    service = InvestorReconciliationService(db)
    try:
        outcome = await service.apply(current_user, request)
    except (ReconciliationValidationError, ReconciliationAuthorizationError, DatastoreError) as exc:
        await db.rollback()
        _raise_for(exc)

    try:
        await db.commit()
    except SQLAlchemyError as exc:
        await db.rollback()
        logger.error("Reconcile apply commit failed for company %s", request.company_id, exc_info=True)
        raise_app_error(500, "DATASTORE_ERROR", str(exc))

    return outcome
