"""
Role helpers for FundOps users.

Global roles see every company; everyone else is scoped by seats and
investor accounts (see app.services.company_access_service).
"""

from typing import Optional


class GlobalRoles:
    """Staff roles stored in profiles.role_global."""
    ADMIN = "imment_admin"
    OPERATOR = "imment_operator"
    
    # Roles with access to every company
    ALL = [ADMIN, OPERATOR]


def is_global_role(role_global: Optional[str]) -> bool:
    """
    Check if a global role grants access to every company.
    
    Args:
        role_global: The profile's role_global value (may be None)
        
    Returns:
        True for FundOps staff roles, False otherwise
    """
    if not role_global:
        return False
    return role_global in GlobalRoles.ALL
