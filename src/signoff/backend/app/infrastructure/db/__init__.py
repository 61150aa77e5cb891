from signoff.backend.app.infrastructure.db.base import Base
from signoff.backend.app.infrastructure.db.uow import SqlAlchemyUnitOfWork, UnitOfWork

__all__ = ['Base', 'UnitOfWork', 'SqlAlchemyUnitOfWork']
