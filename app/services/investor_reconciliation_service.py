"""
Investor reconciliation service: preview and apply of client company links.

Preview is read-only and fully re-derivable: one catalog read, one investor
read, matching in memory. Apply authorizes every company involved before the
first write, then processes rows sequentially with a conditional write per
row so that a concurrent link is reported instead of overwritten.
"""

import logging
from typing import List, Optional, Set

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.models.profile import Profile
from app.repositories.company_repository import CompanyRepository
from app.repositories.investor_repository import InvestorRepository
from app.schemas.investor_reconciliation import (
    MATCH_TYPES,
    ApplyError,
    ApplyOutcome,
    ApplyRequest,
    ReconciliationPreview,
    UpdateRequest,
)
from app.services.company_access_service import CompanyAccessService
from app.services.reconciliation.candidate_index import CandidateIndex
from app.services.reconciliation.errors import (
    DatastoreError,
    ReconciliationAuthorizationError,
    ReconciliationValidationError,
)
from app.services.reconciliation.matcher import DEFAULT_TUNING, MatchTuning
from app.services.reconciliation.report import build_preview
from app.utils.time import utc_now

logger = logging.getLogger(__name__)

MISSING_FIELDS_REASON = "missing required fields: investor_id, company_id, match_type"
ALREADY_SET_REASON = "already has client_company_id set, use force=true to overwrite"
NOT_FOUND_REASON = "not found"


def _clean_id(value: Optional[str]) -> str:
    return value.strip() if isinstance(value, str) else ""


class InvestorReconciliationService:
    """Links imported investors to catalog companies."""

    def __init__(self, db: AsyncSession, tuning: MatchTuning = DEFAULT_TUNING):
        self.db = db
        self.tuning = tuning
        self.companies = CompanyRepository(db)
        self.investors = InvestorRepository(db)
        self.access = CompanyAccessService(db)

    async def _require_access(self, user: Profile, company_id: str, message: str) -> None:
        try:
            allowed = await self.access.can_access_company(user, company_id)
        except SQLAlchemyError as exc:
            logger.error("Access check failed for company %s", company_id, exc_info=True)
            raise DatastoreError(str(exc)) from exc
        if not allowed:
            raise ReconciliationAuthorizationError(message, company_id=company_id)

    async def preview(self, user: Profile, company_id: Optional[str]) -> ReconciliationPreview:
        source_id = _clean_id(company_id)
        if not source_id:
            raise ReconciliationValidationError("company_id is required")

        await self._require_access(user, source_id, "Forbidden")

        try:
            catalog = await self.companies.list_catalog()
            investors = await self.investors.list_with_client_name(source_id)
        except SQLAlchemyError as exc:
            logger.error("Reconcile preview failed for company %s", source_id, exc_info=True)
            raise DatastoreError(str(exc)) from exc

        index = CandidateIndex.build(catalog)
        preview = build_preview(investors, index, self.tuning)

        logger.info(
            "Reconcile preview company=%s total=%d already_set=%d matched=%d not_found=%d ambiguous=%d",
            source_id,
            preview.total,
            preview.already_set,
            preview.matched,
            preview.not_found,
            preview.ambiguous,
        )
        return preview

    async def apply(self, user: Profile, request: ApplyRequest) -> ApplyOutcome:
        source_id = _clean_id(request.company_id)
        if not source_id:
            raise ReconciliationValidationError("company_id is required")

        await self._require_access(user, source_id, "Forbidden")

        updates = request.updates or []
        if not updates:
            raise ReconciliationValidationError("updates must be a non-empty list")
        if len(updates) > settings.RECONCILE_APPLY_MAX_UPDATES:
            raise ReconciliationValidationError(
                f"too many updates: {len(updates)} (max {settings.RECONCILE_APPLY_MAX_UPDATES})"
            )

        # every target is checked before the first write
        target_ids: List[str] = []
        for update in updates:
            target_id = _clean_id(update.company_id)
            if target_id and target_id not in target_ids:
                target_ids.append(target_id)
        for target_id in target_ids:
            await self._require_access(user, target_id, f"Forbidden for target company_id: {target_id}")

        try:
            known_company_ids: Set[str] = set(await self.companies.list_all_ids())
        except SQLAlchemyError as exc:
            logger.error("Reconcile apply failed to load catalog for company %s", source_id, exc_info=True)
            raise DatastoreError(str(exc)) from exc

        outcome = ApplyOutcome()
        errors: List[ApplyError] = []
        for update in updates:
            reason = await self._apply_row(source_id, update, known_company_ids, request.force)
            if reason is None:
                outcome.updated += 1
            else:
                outcome.skipped += 1
                errors.append(ApplyError(investor_id=update.investor_id or "unknown", reason=reason))

        outcome.errors = errors or None
        logger.info(
            "Reconcile apply company=%s force=%s updated=%d skipped=%d",
            source_id,
            request.force,
            outcome.updated,
            outcome.skipped,
        )
        return outcome

    async def _apply_row(
        self,
        source_id: str,
        update: UpdateRequest,
        known_company_ids: Set[str],
        force: bool,
    ) -> Optional[str]:
        """Apply one row. Returns None on success, otherwise the skip reason."""
        investor_id = _clean_id(update.investor_id)
        target_id = _clean_id(update.company_id)
        if not investor_id or not target_id or not update.match_type:
            return MISSING_FIELDS_REASON
        if update.match_type not in MATCH_TYPES:
            return f"invalid match_type: {update.match_type}"
        if target_id not in known_company_ids:
            return f"target company not found: {target_id}"

        try:
            async with self.db.begin_nested():
                updated_id = await self.investors.set_client_company(
                    investor_id=investor_id,
                    source_company_id=source_id,
                    client_company_id=target_id,
                    match_type=update.match_type,
                    matched_at=utc_now(),
                    only_if_unset=not force,
                )
        except Exception as exc:  # noqa: BLE001
            logger.warning("Reconcile apply row failed investor=%s: %s", investor_id, exc)
            return f"database error: {exc}"

        if updated_id is None:
            return NOT_FOUND_REASON if force else ALREADY_SET_REASON
        return None
