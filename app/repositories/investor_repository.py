"""
Investor repository - reads and conditional link writes for reconciliation.
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import select, update, and_
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.investor import Investor


class InvestorRepository:
    """Queries over fundops_investors used by the reconciliation service."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_with_client_name(self, company_id: str) -> List[Investor]:
        """Investors of a source company that carry a non-empty client_name."""
        query = (
            select(Investor)
            .where(
                and_(
                    Investor.company_id == company_id,
                    Investor.client_name.is_not(None),
                    Investor.client_name != "",
                )
            )
            .order_by(Investor.created_at.asc(), Investor.id.asc())
            # link writes bypass the identity map
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def set_client_company(
        self,
        *,
        investor_id: str,
        source_company_id: str,
        client_company_id: str,
        match_type: str,
        matched_at: datetime,
        only_if_unset: bool,
    ) -> Optional[str]:
        """
        Link an investor to a client company.

        The row is filtered by investor id and source company; with
        only_if_unset the write also requires client_company_id IS NULL.
        Returns the updated investor id, or None when no row matched.
        """
        conditions = [
            Investor.id == investor_id,
            Investor.company_id == source_company_id,
        ]
        if only_if_unset:
            conditions.append(Investor.client_company_id.is_(None))

        stmt = (
            update(Investor)
            .where(and_(*conditions))
            .values(
                client_company_id=client_company_id,
                client_company_match_type=match_type,
                client_company_matched_at=matched_at,
                updated_at=matched_at,
            )
            .returning(Investor.id)
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

