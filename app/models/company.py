"""
Company model.

Represents a company in the FundOps catalog. Investor records are linked
to these rows by the reconciliation engine, which never modifies them.
"""

from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base_model import RecordModel


class Company(RecordModel):
    """Company table - the canonical company catalog."""
    
    __tablename__ = "fundops_companies"
    
    # Display name, the canonical company name used for matching
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    
    legal_name: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )
