"""
Company access models.

A user reaches a company either through a seat (company user) or through
an investor portal account linked to one of their investors.
"""

from sqlalchemy import String, Boolean, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base_model import RecordModel


class CompanyUser(RecordModel):
    """Seat of a user inside a company."""

    __tablename__ = "fundops_company_users"

    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    company_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("fundops_companies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    role: Mapped[str] = mapped_column(String(50), nullable=False, default="company_admin")
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    __table_args__ = (
        UniqueConstraint("user_id", "company_id", name="uq_fundops_company_users_user_company"),
    )


class InvestorUser(RecordModel):
    """Link between a portal user and an investor record."""

    __tablename__ = "fundops_investor_users"

    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    investor_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("fundops_investors.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    __table_args__ = (
        UniqueConstraint("user_id", "investor_id", name="uq_fundops_investor_users_user_investor"),
    )


class InvestorAccount(RecordModel):
    """Active investor account inside a company."""

    __tablename__ = "fundops_investor_accounts"

    investor_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("fundops_investors.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    company_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("fundops_companies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
