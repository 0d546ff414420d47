"""Module: pets."""

import uuid

from petclinic.db.models.pet import Pet
from petclinic.db.repositories.base import CrudRepository


class PetRepository(CrudRepository[Pet]):
    model = Pet
    order_by = (Pet.name,)

    def find_by_owner(self, owner_id: uuid.UUID) -> list[Pet]:
        stmt = self._select().where(Pet.owner_id == owner_id)
        return list(self.db.execute(stmt).scalars().all())
