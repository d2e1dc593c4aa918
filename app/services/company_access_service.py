"""Company-level authorization checks for FundOps users."""

from dataclasses import dataclass
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.permissions import is_global_role
from app.models.profile import Profile
from app.repositories.company_access_repository import CompanyAccessRepository


@dataclass(frozen=True)
class UserRoleContext:
    role_global: Optional[str]
    is_active: bool


class CompanyAccessService:
    """Answers "may this user act on this company?" as a yes/no check."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repo = CompanyAccessRepository(db)

    @staticmethod
    def get_user_role_context(user: Profile) -> UserRoleContext:
        return UserRoleContext(role_global=user.role_global, is_active=user.is_active is not False)

    async def can_access_company(
        self,
        user: Profile,
        company_id: str,
        role_context: Optional[UserRoleContext] = None,
    ) -> bool:
        """
        Check access in order: active profile, global role, company seat,
        then an active investor account reachable through the user's investors.
        """
        ctx = role_context or self.get_user_role_context(user)
        if not ctx.is_active:
            return False
        if is_global_role(ctx.role_global):
            return True

        if await self.repo.has_active_seat(user.id, company_id):
            return True

        investor_ids = await self.repo.list_investor_ids_for_user(user.id)
        if not investor_ids:
            return False
        return await self.repo.has_active_investor_account(investor_ids, company_id)
