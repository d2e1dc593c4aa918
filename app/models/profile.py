"""
Profile model for authenticated callers.
"""

from typing import Optional

from sqlalchemy import String, Boolean
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base_model import RecordModel


class Profile(RecordModel):
    """
    Profile table - one row per authenticated user.
    
    role_global grants access to every company when it is one of the
    FundOps staff roles (see app.core.permissions.GlobalRoles).
    """
    
    __tablename__ = "profiles"
    
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
    )
    
    full_name: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )
    
    role_global: Mapped[Optional[str]] = mapped_column(
        String(50),
        nullable=True,
    )
    
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
    )
