# app/services/common/permissions.py
"""
Principal and role checks for the service layer.

Services receive a ``Principal`` built from the authenticated user and
never look at request objects directly.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from app.config.settings import settings

from .errors import AuthorizationError


@dataclass(frozen=True)
class Principal:
    """
    Represents an authenticated user in the service layer.

    Attributes:
        user_id: Unique identifier for the user
        role: User's role name
        hostel_id: Hostel the user is scoped to (None for super admins)
    """
    user_id: str
    role: str
    hostel_id: Optional[str] = None

    @property
    def is_super_admin(self) -> bool:
        """Super admins may act across every hostel."""
        return self.role in settings.SUPER_ADMIN_ROLES


def require_super_admin(principal: Principal) -> None:
    if not principal.is_super_admin:
        raise AuthorizationError("Access denied. Super admin only.")
