"""
Base repository interfaces for the data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

import logging
from typing import Any, Generic, TypeVar, Optional, List, Mapping, Type
from sqlalchemy.orm import Query, Session
from sqlalchemy.exc import SQLAlchemyError
from abc import ABC

from app.exceptions import PersistenceError

ModelType = TypeVar("ModelType")

logger = logging.getLogger("dailydiet.repositories")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing common write helpers.
    All repositories should inherit from this class.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def _commit(self) -> None:
        """Commit the unit of work; roll back and raise PersistenceError on failure"""
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"commit_failed model={self.model.__name__} error={e}")
            raise PersistenceError(f"Could not persist {self.model.__name__}") from e

    def create(self, entity: ModelType) -> ModelType:
        """Create new entity"""
        self.db.add(entity)
        self._commit()
        self.db.refresh(entity)
        return entity


class OwnedRepository(BaseRepository[ModelType]):
    """
    Repository for records that belong to exactly one owner.

    Every accessor goes through ``owned_query``, which filters on both the
    record identifier and the owner. A record owned by someone else is
    indistinguishable from a missing one.
    """

    id_field = "id"
    owner_field = "user_id"

    def owned_query(self, owner_id: str, entity_id: Any) -> Query:
        """Query matching the single record ``entity_id`` only if ``owner_id`` owns it"""
        return self.db.query(self.model).filter(
            getattr(self.model, self.id_field) == entity_id,
            getattr(self.model, self.owner_field) == owner_id,
        )

    def get_owned(self, owner_id: str, entity_id: Any) -> Optional[ModelType]:
        try:
            return self.owned_query(owner_id, entity_id).first()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"Could not read {self.model.__name__}") from e

    def update_owned(
        self, owner_id: str, entity_id: Any, values: Mapping[str, Any]
    ) -> bool:
        """Apply ``values`` in one owner-scoped UPDATE. Returns False if nothing matched."""
        try:
            matched = self.owned_query(owner_id, entity_id).update(
                dict(values), synchronize_session="fetch"
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"Could not update {self.model.__name__}") from e
        self._commit()
        return matched > 0

    def delete_owned(self, owner_id: str, entity_id: Any) -> bool:
        """Delete in one owner-scoped statement. Returns False if nothing matched."""
        try:
            matched = self.owned_query(owner_id, entity_id).delete(
                synchronize_session="fetch"
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"Could not delete {self.model.__name__}") from e
        self._commit()
        return matched > 0

    def list_owned(self, owner_id: str, *order_by) -> List[ModelType]:
        """Fresh list of every record of ``owner_id``"""
        query = self.db.query(self.model).filter(
            getattr(self.model, self.owner_field) == owner_id
        )
        if order_by:
            query = query.order_by(*order_by)
        try:
            return query.all()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"Could not list {self.model.__name__}") from e
