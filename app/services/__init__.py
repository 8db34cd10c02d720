# app/services/__init__.py
"""
Service layer root package.

Each subpackage implements application use-cases on top of:

- SQLAlchemy models (app.models.*)
- Repositories (app.repositories.*)
- Pydantic schemas (app.schemas.*)
- Common service infrastructure (app.services.common.*)

Typical pattern for a service:

    class SomeService:
        def __init__(self, session: Session) -> None:
            self.session = session

        def some_use_case(...):
            with UnitOfWork(self.session) as uow:
                repo = uow.get_repo(SomeRepository)
                ...
"""
