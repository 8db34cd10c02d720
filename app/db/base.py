"""SQLAlchemy metadata registry for all models."""
from app.models.base import Base


def import_models() -> None:
    """Import all models so they are registered on ``Base.metadata``."""
    from app.models import hostel, room, student, user  # noqa: F401


import_models()

__all__ = ["Base", "import_models"]
