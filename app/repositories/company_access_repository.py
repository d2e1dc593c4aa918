"""
Repository for company access lookups (seats and investor accounts).
"""

from typing import List

from sqlalchemy import select, and_
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.company_access import CompanyUser, InvestorAccount, InvestorUser


class CompanyAccessRepository:
    """Read helpers backing CompanyAccessService."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def has_active_seat(self, user_id: str, company_id: str) -> bool:
        result = await self.db.execute(
            select(CompanyUser.id)
            .where(
                and_(
                    CompanyUser.user_id == user_id,
                    CompanyUser.company_id == company_id,
                    CompanyUser.is_active.is_(True),
                )
            )
            .limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def list_investor_ids_for_user(self, user_id: str) -> List[str]:
        result = await self.db.execute(
            select(InvestorUser.investor_id).where(InvestorUser.user_id == user_id)
        )
        return list(result.scalars().all())

    async def has_active_investor_account(self, investor_ids: List[str], company_id: str) -> bool:
        if not investor_ids:
            return False
        result = await self.db.execute(
            select(InvestorAccount.id)
            .where(
                and_(
                    InvestorAccount.investor_id.in_(investor_ids),
                    InvestorAccount.company_id == company_id,
                    InvestorAccount.is_active.is_(True),
                )
            )
            .limit(1)
        )
        return result.scalar_one_or_none() is not None

