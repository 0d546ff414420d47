"""Module: visits."""

import uuid
from typing import Iterable

from sqlalchemy import desc

from petclinic.db.models.visit import Visit
from petclinic.db.repositories.base import CrudRepository


class VisitRepository(CrudRepository[Visit]):
    model = Visit
    # Newest first, then by entry time for visits on the same day.
    order_by = (desc(Visit.visit_date), desc(Visit.created_at))

    def find_by_pet(self, pet_id: uuid.UUID) -> list[Visit]:
        stmt = self._select().where(Visit.pet_id == pet_id)
        return list(self.db.execute(stmt).scalars().all())

    def find_by_pet_ids(self, pet_ids: Iterable[uuid.UUID]) -> list[Visit]:
        ids = list(pet_ids)
        if not ids:
            return []
        stmt = self._select().where(Visit.pet_id.in_(ids))
        return list(self.db.execute(stmt).scalars().all())
