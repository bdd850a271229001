"""
Store-scoped repository base

Every query is filtered by store_id; rows of another store are invisible
(a foreign id behaves exactly like an unknown id).
"""
import logging
from typing import Dict, Generic, List, Optional, Sequence, Tuple, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

DomainT = TypeVar("DomainT", bound=BaseModel)


class RepositoryError(Exception):
    """Base class for data access errors"""


class EntityNotFoundError(RepositoryError):
    """Entity (or a referenced entity) does not exist in this store"""

    def __init__(self, resource: str, entity_id: str):
        self.resource = resource
        self.entity_id = entity_id
        super().__init__(f"{resource} {entity_id} not found")


class DependentRecordsError(RepositoryError):
    """Delete rejected because other records still reference the entity"""

    def __init__(self, resource: str, entity_id: str, dependents: Dict[str, int]):
        self.resource = resource
        self.entity_id = entity_id
        self.dependents = dependents
        detail = ", ".join(f"{count} {name}" for name, count in dependents.items()) or "other records"
        super().__init__(f"{resource} {entity_id} is still used by {detail}")


class StoreScopedRepository(Generic[DomainT]):
    """
    CRUD for one store-scoped table

    Subclasses set:
        model: SQLAlchemy model class
        domain: pydantic domain model returned to callers
        resource: singular display name used in errors
        references: (form field, referenced model, display name) checked on save
        dependents: (model, foreign key column name, display name) checked on delete
    """

    model = None
    domain: Type[DomainT] = None
    resource: str = "Entity"
    references: Sequence[Tuple[str, type, str]] = ()
    dependents: Sequence[Tuple[type, str, str]] = ()

    def __init__(self, db: Session):
        self.db = db

    def _to_domain(self, row) -> DomainT:
        return self.domain.model_validate(row)

    def _query(self, store_id: str):
        return self.db.query(self.model).filter(self.model.store_id == store_id)

    def _get_row(self, store_id: str, entity_id: str):
        row = self._query(store_id).filter(self.model.id == entity_id).first()
        if row is None:
            raise EntityNotFoundError(self.resource, entity_id)
        return row

    def _check_references(self, store_id: str, values: BaseModel) -> None:
        for field_name, ref_model, ref_name in self.references:
            ref_id = getattr(values, field_name)
            exists = (
                self.db.query(ref_model.id)
                .filter(ref_model.id == ref_id, ref_model.store_id == store_id)
                .first()
            )
            if exists is None:
                raise EntityNotFoundError(ref_name, ref_id)

    def _column_values(self, values: BaseModel) -> dict:
        """Form values to column values (override for nested data)"""
        return values.model_dump()

    def _count_dependents(self, entity_id: str) -> Dict[str, int]:
        counts = {}
        for dep_model, fk_column, dep_name in self.dependents:
            count = (
                self.db.query(func.count(dep_model.id))
                .filter(getattr(dep_model, fk_column) == entity_id)
                .scalar()
            )
            if count:
                counts[dep_name] = count
        return counts

    def find_all(self, store_id: str) -> List[DomainT]:
        """All entities of a store, newest first"""
        rows = self._query(store_id).order_by(self.model.created_at.desc()).all()
        return [self._to_domain(row) for row in rows]

    def find_by_id(self, store_id: str, entity_id: str) -> Optional[DomainT]:
        row = self._query(store_id).filter(self.model.id == entity_id).first()
        if row is None:
            return None
        return self._to_domain(row)

    def create(self, store_id: str, values: BaseModel) -> DomainT:
        self._check_references(store_id, values)

        row = self.model(store_id=store_id, **self._column_values(values))
        self.db.add(row)
        self.db.commit()
        self.db.refresh(row)

        logger.info(f"Created {self.resource} {row.id} in store {store_id}")
        return self._to_domain(row)

    def update(self, store_id: str, entity_id: str, values: BaseModel) -> DomainT:
        row = self._get_row(store_id, entity_id)
        self._check_references(store_id, values)

        for column, value in self._column_values(values).items():
            setattr(row, column, value)
        self.db.commit()
        self.db.refresh(row)

        logger.info(f"Updated {self.resource} {entity_id} in store {store_id}")
        return self._to_domain(row)

    def delete(self, store_id: str, entity_id: str) -> DomainT:
        """
        Delete an entity

        Raises:
            EntityNotFoundError: unknown id (or id of another store)
            DependentRecordsError: other records still reference it
        """
        row = self._get_row(store_id, entity_id)

        dependents = self._count_dependents(entity_id)
        if dependents:
            logger.warning(f"Refusing to delete {self.resource} {entity_id}: {dependents}")
            raise DependentRecordsError(self.resource, entity_id, dependents)

        deleted = self._to_domain(row)
        try:
            self.db.delete(row)
            self.db.commit()
        except IntegrityError as e:
            # Reference added by a concurrent request after the count above
            self.db.rollback()
            logger.warning(f"Delete of {self.resource} {entity_id} hit a constraint: {e}")
            raise DependentRecordsError(self.resource, entity_id, {}) from e

        logger.info(f"Deleted {self.resource} {entity_id} from store {store_id}")
        return deleted
