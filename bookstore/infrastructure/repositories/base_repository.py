"""
SQLAlchemy implementation of the Base Repository.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Generic, Optional, Type, TypeVar

import structlog
from pydantic import BaseModel
from sqlalchemy import func
from sqlalchemy.orm import Session

from bookstore.core.exceptions import EntityNotFoundException
from bookstore.domain.repositories.base import BaseRepository
from bookstore.infrastructure.database import Base
from bookstore.infrastructure.repositories.query import PageParams, PageResult, QueryFilter, paginate

ModelType = TypeVar("ModelType", bound=Base)

logger = structlog.get_logger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_dict(obj_in: Any) -> Dict[str, Any]:
    if isinstance(obj_in, BaseModel):
        return obj_in.model_dump(exclude_unset=True)
    return dict(obj_in)


class SQLAlchemyRepository(BaseRepository[ModelType], Generic[ModelType]):
    """Generic repository implementation for SQLAlchemy models.

    Writes stamp their own timestamps and always re-read the row so callers
    get what the database actually holds.
    """

    entity_name = "Entity"

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def not_found(self, id: int) -> EntityNotFoundException:
        return EntityNotFoundException(f"{self.entity_name} not found", {"id": id})

    def count(self) -> int:
        return self.db.query(func.count(self.model.id)).scalar() or 0

    def get_by_id(self, id: int) -> Optional[ModelType]:
        return (
            self.db.query(self.model)
            .filter(self.model.id == id)
            .populate_existing()
            .first()
        )

    def _listing_queries(self):
        """Unfiltered (data, count) pair behind every paged listing; newest first."""
        data_query = self.db.query(self.model).order_by(self.model.created_at.desc(), self.model.id.desc())
        count_query = self.db.query(func.count(self.model.id))
        return data_query, count_query

    def build_list_queries(self, query_filter: QueryFilter):
        """The (data, count) pair with the same predicates applied to both."""
        return tuple(query_filter.apply(query) for query in self._listing_queries())

    def list(self, params: PageParams, query_filter: Optional[QueryFilter] = None) -> PageResult[ModelType]:
        data_query, count_query = self._listing_queries()
        return paginate(data_query, count_query, query_filter or QueryFilter(), params)

    def create(self, obj_in: Any) -> ModelType:
        obj_data = _as_dict(obj_in)
        now = utcnow()
        db_obj = self.model(**obj_data, created_at=now, updated_at=now)
        self.db.add(db_obj)
        self.db.commit()

        logger.info(f"{self.entity_name} created", entity_id=db_obj.id)
        return self.get_by_id(db_obj.id)

    def update(self, id: int, obj_in: Any) -> ModelType:
        update_data = {
            field: value
            for field, value in _as_dict(obj_in).items()
            if hasattr(self.model, field)
        }
        update_data["updated_at"] = utcnow()

        matched = (
            self.db.query(self.model)
            .filter(self.model.id == id)
            .update(update_data, synchronize_session=False)
        )
        if matched == 0:
            self.db.rollback()
            raise self.not_found(id)
        self.db.commit()

        logger.info(f"{self.entity_name} updated", entity_id=id, fields=sorted(update_data))
        return self.get_by_id(id)

    def delete(self, id: int) -> None:
        deleted = (
            self.db.query(self.model)
            .filter(self.model.id == id)
            .delete(synchronize_session=False)
        )
        if deleted == 0:
            self.db.rollback()
            raise self.not_found(id)
        self.db.commit()

        logger.info(f"{self.entity_name} deleted", entity_id=id)
