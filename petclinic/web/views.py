"""Module: views.

View models assembled from repository calls for the owner pages.
"""

import uuid
from collections import defaultdict
from dataclasses import dataclass, field

from sqlalchemy.orm import Session

from petclinic.db.models.owner import Owner
from petclinic.db.models.pet import Pet
from petclinic.db.models.visit import Visit
from petclinic.db.repositories import OwnerRepository, PetRepository, PetTypeRepository, VisitRepository


@dataclass
class PetDetails:
    pet: Pet
    type_name: str | None
    visits: list[Visit] = field(default_factory=list)


@dataclass
class OwnerDetails:
    owner: Owner
    pets: list[PetDetails] = field(default_factory=list)


def load_owner_details(db: Session, owner_id: uuid.UUID) -> OwnerDetails | None:
    """Owner with each pet's type name and visits (newest first), or None."""
    owner = OwnerRepository(db).find_by_id(owner_id)
    if owner is None:
        return None

    pets = PetRepository(db).find_by_owner(owner.id)
    type_names = {t.id: t.name for t in PetTypeRepository(db).find_all()}

    visits_by_pet: dict[uuid.UUID, list[Visit]] = defaultdict(list)
    for visit in VisitRepository(db).find_by_pet_ids(p.id for p in pets):
        visits_by_pet[visit.pet_id].append(visit)

    return OwnerDetails(
        owner=owner,
        pets=[PetDetails(pet=p, type_name=type_names.get(p.type_id), visits=visits_by_pet[p.id]) for p in pets],
    )
