"""
Models package.

Import all models here so they are registered with SQLAlchemy.
This file also makes it easy to import models from one place.
"""

from app.models.company import Company
from app.models.investor import Investor
from app.models.profile import Profile
from app.models.company_access import CompanyUser, InvestorUser, InvestorAccount

# Export all models
__all__ = [
    "Company",
    "Investor",
    "Profile",
    "CompanyUser",
    "InvestorUser",
    "InvestorAccount",
]
