"""Module: owners."""

from sqlalchemy import func

from petclinic.db.models.owner import Owner
from petclinic.db.repositories.base import CrudRepository


class OwnerRepository(CrudRepository[Owner]):
    model = Owner
    order_by = (Owner.last_name, Owner.first_name)

    def find_by_last_name(self, last_name: str | None) -> list[Owner]:
        # Case-insensitive prefix match; a blank filter lists everybody.
        prefix = (last_name or "").strip().lower()
        if not prefix:
            return self.find_all()
        stmt = self._select().where(func.lower(Owner.last_name).startswith(prefix, autoescape=True))
        return list(self.db.execute(stmt).scalars().all())
