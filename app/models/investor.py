"""
Investor model.

Investor records are imported per company. The free-text client_name
typed during import is resolved to client_company_id by reconciliation.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import String, DateTime, ForeignKey, Index, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base_model import RecordModel


class Investor(RecordModel):
    """Investor table - one row per imported investor."""
    
    __tablename__ = "fundops_investors"
    
    # Company that imported (and owns) this investor record
    company_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("fundops_companies.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    
    full_name: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )
    
    email: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )
    
    # Raw "client company" label from the import
    client_name: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )
    
    client_company_id: Mapped[Optional[str]] = mapped_column(
        String(36),
        ForeignKey("fundops_companies.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    
    client_company_match_type: Mapped[Optional[str]] = mapped_column(
        String(20),
        nullable=True,
    )
    
    client_company_matched_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )
    
    __table_args__ = (
        CheckConstraint(
            "client_company_match_type IS NULL OR client_company_match_type IN ('manual', 'exact', 'normalized')",
            name="ck_fundops_investors_match_type",
        ),
        Index("ix_fundops_investors_company_client", "company_id", "client_company_id"),
    )
