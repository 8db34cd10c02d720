# app/services/common/__init__.py
"""
Shared service-layer infrastructure.

- **UnitOfWork**: transaction boundary & repository factory with savepoint support
- **errors**: service-layer exception hierarchy
- **permissions**: the request principal and role checks
"""
from __future__ import annotations

from . import errors, permissions
from .unit_of_work import NestedUnitOfWork, TransactionError, UnitOfWork

__all__ = [
    "errors",
    "permissions",
    "UnitOfWork",
    "NestedUnitOfWork",
    "TransactionError",
]
