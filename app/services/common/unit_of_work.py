# app/services/common/unit_of_work.py
"""
Unit of Work pattern implementation.

Provides the transaction boundary for the service layer over an injected
SQLAlchemy session, plus savepoint-scoped nested units for work that must
be able to fail without aborting the surrounding transaction.
"""
from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Any, Optional, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.logging import get_logger
from app.repositories.base import BaseRepository

from .errors import ServiceError

logger = get_logger(__name__)

TRepository = TypeVar("TRepository", bound=BaseRepository)


class TransactionError(ServiceError):
    """Raised when a database transaction fails."""

    def __init__(self, message: str, original_error: Optional[Exception] = None) -> None:
        super().__init__(message, details={"error_type": type(original_error).__name__})
        self.original_error = original_error


class UnitOfWork(AbstractContextManager["UnitOfWork"]):
    """
    Unit of Work for managing a database transaction.

    The session is owned by the caller (usually the request-scoped
    ``get_db`` dependency); the unit only commits or rolls back.

    Usage:
        >>> with UnitOfWork(session) as uow:
        ...     students = uow.get_repo(StudentRepository)
        ...     students.add(student)
        ...     # Auto-commits on __exit__ if no exception
    """

    def __init__(self, session: Session, *, auto_commit: bool = True) -> None:
        self.session = session
        self._auto_commit = auto_commit
        self._active = False
        self._committed = False
        self._rolled_back = False
        self._repo_cache: dict[Type[BaseRepository], BaseRepository] = {}

    # ------------------------------------------------------------------ #
    # Context manager protocol
    # ------------------------------------------------------------------ #

    def __enter__(self) -> "UnitOfWork":
        if self._active:
            raise RuntimeError("UnitOfWork context already entered")

        self._active = True
        self._committed = False
        self._rolled_back = False
        self._repo_cache.clear()
        logger.debug("UnitOfWork started")
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> bool:
        try:
            if exc_type is None:
                if self._auto_commit and not self._committed and not self._rolled_back:
                    self.commit()
            elif not self._rolled_back:
                self.session.rollback()
                self._rolled_back = True
                logger.warning(f"UnitOfWork rolled back due to {exc_type.__name__}")
        finally:
            self._active = False
            self._repo_cache.clear()

        # Propagate any exception
        return False

    # ------------------------------------------------------------------ #
    # Transaction control
    # ------------------------------------------------------------------ #

    def commit(self) -> None:
        """
        Commit the current transaction.

        Raises:
            TransactionError: If commit fails
        """
        if self._committed:
            logger.warning("commit() called on already-committed transaction")
            return

        if self._rolled_back:
            raise RuntimeError("Cannot commit a rolled-back transaction")

        try:
            self.session.commit()
            self._committed = True
            logger.debug("UnitOfWork committed")
        except SQLAlchemyError as exc:
            logger.error(f"Commit failed: {exc}")
            self.session.rollback()
            self._rolled_back = True
            raise TransactionError("Failed to commit transaction", exc) from exc

    # ------------------------------------------------------------------ #
    # Repository factory
    # ------------------------------------------------------------------ #

    def get_repo(self, repo_cls: Type[TRepository]) -> TRepository:
        """Get or create a repository bound to this unit's session."""
        if repo_cls not in self._repo_cache:
            self._repo_cache[repo_cls] = repo_cls(self.session)
        return self._repo_cache[repo_cls]  # type: ignore


class NestedUnitOfWork(AbstractContextManager["NestedUnitOfWork"]):
    """
    Nested Unit of Work using SQLAlchemy savepoints.

    Allows partial rollbacks while the outer transaction continues.
    """

    def __init__(self, session: Session) -> None:
        self.session = session
        self._savepoint: Any = None

    def __enter__(self) -> "NestedUnitOfWork":
        self._savepoint = self.session.begin_nested()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> bool:
        if self._savepoint.is_active:
            if exc_type is None:
                self._savepoint.commit()
            else:
                self._savepoint.rollback()
                logger.warning(f"Savepoint rolled back due to {exc_type.__name__}")

        # Propagate exception
        return False
