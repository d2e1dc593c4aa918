"""
SQLAlchemy declarative base shared by every FundOps model.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Single metadata object for models, Alembic and test fixtures."""
    pass
