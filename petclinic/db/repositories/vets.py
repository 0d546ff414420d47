"""Module: vets."""

from sqlalchemy import select

from petclinic.db.models.vet import Specialty, Vet
from petclinic.db.repositories.base import CrudRepository


class VetRepository(CrudRepository[Vet]):
    model = Vet
    order_by = (Vet.last_name, Vet.first_name)


class SpecialtyRepository(CrudRepository[Specialty]):
    model = Specialty
    order_by = (Specialty.name,)

    def find_by_name(self, name: str) -> Specialty | None:
        stmt = select(Specialty).where(Specialty.name == name)
        return self.db.execute(stmt).scalar_one_or_none()
