"""Module: pet_types."""

from sqlalchemy import select

from petclinic.db.models.pet_type import PetType
from petclinic.db.repositories.base import CrudRepository


class PetTypeRepository(CrudRepository[PetType]):
    model = PetType
    order_by = (PetType.name,)

    def find_by_name(self, name: str) -> PetType | None:
        stmt = select(PetType).where(PetType.name == name)
        return self.db.execute(stmt).scalar_one_or_none()
