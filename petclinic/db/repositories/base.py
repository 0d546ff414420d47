"""Module: base.

Generic CRUD repository over a SQLAlchemy session. Specialised
repositories add their finder queries and otherwise forward here.
"""

from __future__ import annotations

import uuid
from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from petclinic.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class CrudRepository(Generic[ModelT]):
    model: type[ModelT]
    # Columns used for the default ``find_all`` ordering.
    order_by: Sequence[Any] = ()

    def __init__(self, db: Session):
        self.db = db

    def _select(self):
        stmt = select(self.model)
        if self.order_by:
            stmt = stmt.order_by(*self.order_by)
        return stmt

    def find_all(self) -> list[ModelT]:
        return list(self.db.execute(self._select()).scalars().all())

    def find_by_id(self, entity_id: uuid.UUID) -> ModelT | None:
        return self.db.get(self.model, entity_id)

    def save(self, entity: ModelT) -> ModelT:
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def delete(self, entity: ModelT) -> None:
        self.db.delete(entity)
        self.db.commit()
