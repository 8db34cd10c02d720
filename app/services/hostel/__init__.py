"""
Hostel services: tenant management and request scoping.
"""

from app.services.hostel.hostel_scope import (
    ensure_in_scope,
    resolve_hostel_scope,
    resolve_target_hostel,
    scope_for,
)
from app.services.hostel.hostel_service import HostelService

__all__ = [
    "HostelService",
    "resolve_hostel_scope",
    "scope_for",
    "ensure_in_scope",
    "resolve_target_hostel",
]
