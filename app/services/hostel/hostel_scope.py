# app/services/hostel/hostel_scope.py
"""
Tenant (hostel) scoping.

Every request operates against a hostel scope: a single hostel id, or
``None`` for a super admin acting across all hostels.
"""

from typing import Optional

from app.config.settings import settings
from app.services.common.errors import AuthorizationError, ValidationError
from app.services.common.permissions import Principal


def resolve_hostel_scope(
    role: str,
    explicit_hostel_id: Optional[str],
    own_hostel_id: Optional[str],
) -> Optional[str]:
    """
    Determine the hostel a request operates against.

    Super admins use the explicitly requested hostel when given, else
    their own (which may be ``None``: all hostels). Every other role is
    pinned to its own hostel and rejected when it has none.

    Raises:
        AuthorizationError: non-super-admin caller without a hostel
    """
    if role in settings.SUPER_ADMIN_ROLES:
        return explicit_hostel_id or own_hostel_id

    if not own_hostel_id:
        raise AuthorizationError("No hostel assigned to user")
    return own_hostel_id


def scope_for(principal: Principal, explicit_hostel_id: Optional[str] = None) -> Optional[str]:
    return resolve_hostel_scope(principal.role, explicit_hostel_id, principal.hostel_id)


def ensure_in_scope(scope: Optional[str], hostel_id: Optional[str]) -> None:
    """Reject access to a record owned by a hostel outside ``scope``."""
    if scope is not None and hostel_id != scope:
        raise AuthorizationError("Access denied for this hostel")


def resolve_target_hostel(principal: Principal, *candidates: Optional[str]) -> str:
    """
    Hostel id for a record being created.

    Candidates are tried in order (e.g. body value, then query value);
    callers that are not super admins always get their own hostel and
    may not name a different one.

    Raises:
        AuthorizationError: a scoped caller names another hostel
        ValidationError: no hostel could be resolved
    """
    explicit = next((candidate for candidate in candidates if candidate), None)

    if not principal.is_super_admin and explicit and explicit != principal.hostel_id:
        raise AuthorizationError("Access denied for this hostel")

    hostel_id = scope_for(principal, explicit)
    if not hostel_id:
        raise ValidationError("Hostel ID is required", field="hostel_id")
    return hostel_id
