"""
Company repository - read-only catalog access for reconciliation.
"""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.company import Company


class CompanyRepository:
    """Bulk catalog reads. Reconciliation never writes companies."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_catalog(self) -> List:
        """Return (id, name) rows for every company, in stable order."""
        result = await self.db.execute(
            select(Company.id, Company.name).order_by(Company.created_at.asc(), Company.id.asc())
        )
        return list(result.all())

    async def list_all_ids(self) -> List[str]:
        result = await self.db.execute(select(Company.id))
        return list(result.scalars().all())
