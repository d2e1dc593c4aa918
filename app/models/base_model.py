"""
Base model with common fields.

All FundOps tables inherit from this to get:
- id (opaque string primary key, UUID4 by default)
- created_at (when the record was created)
- updated_at (when the record was last modified)
"""

import uuid
from datetime import datetime

from sqlalchemy import String, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


def new_id() -> str:
    return str(uuid.uuid4())


class RecordModel(Base):
    """
    Abstract base class for FundOps records.
    
    This is not a real table - it's a template that other models inherit from.
    Ids are stored as strings because they arrive from imports and the API as
    opaque identifiers.
    """
    
    __abstract__ = True  # This means: don't create a table for this class
    
    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=new_id,
    )
    
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
