"""
Base repository with standardized CRUD operations.

Repositories never commit: transaction boundaries belong to the service
layer's ``UnitOfWork``. Writes are flushed so database errors surface at
the call site.
"""

from typing import Any, Dict, Generic, Optional, Type, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from app.core.logging import get_logger
from app.models.base import BaseModel

logger = get_logger(__name__)

# Type variable for model classes
ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseRepository(Generic[ModelType]):
    """
    Base repository for a single model.

    Provides id lookups (optionally row-locked) and flushed writes bound to an
    injected session.
    """

    def __init__(self, session: Session, model: Type[ModelType]):
        """
        Initialize repository.

        Args:
            session: Database session
            model: SQLAlchemy model class
        """
        self.session = session
        self.model = model

    def _base_select(self) -> Select:
        return select(self.model)

    # ==================== Read Operations ====================

    def find_by_id(self, id: str, *, for_update: bool = False) -> Optional[ModelType]:
        """
        Find entity by ID.

        Args:
            id: Entity ID
            for_update: Lock the row until the transaction ends

        Returns:
            Entity or None
        """
        if id is None:
            return None
        stmt = self._base_select().where(self.model.id == id)
        if for_update:
            # Reload attributes even when the instance is already in the session
            stmt = stmt.with_for_update().execution_options(populate_existing=True)
        return self.session.execute(stmt).scalar_one_or_none()

    # ==================== Write Operations ====================

    def add(self, entity: ModelType) -> ModelType:
        self.session.add(entity)
        self.session.flush()
        logger.debug(f"Created {self.model.__name__} with id: {entity.id}")
        return entity

    def update(self, entity: ModelType, data: Dict[str, Any]) -> ModelType:
        """Apply ``data`` to ``entity`` for every attribute the model defines."""
        for key, value in data.items():
            if hasattr(entity, key):
                setattr(entity, key, value)
        self.session.flush()
        return entity

    def delete(self, entity: ModelType) -> None:
        self.session.delete(entity)
        self.session.flush()
        logger.debug(f"Deleted {self.model.__name__} with id: {entity.id}")
