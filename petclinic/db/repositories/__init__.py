from petclinic.db.repositories.base import CrudRepository
from petclinic.db.repositories.owners import OwnerRepository
from petclinic.db.repositories.pet_types import PetTypeRepository
from petclinic.db.repositories.pets import PetRepository
from petclinic.db.repositories.vets import SpecialtyRepository, VetRepository
from petclinic.db.repositories.visits import VisitRepository

__all__ = [
    "CrudRepository",
    "OwnerRepository",
    "PetRepository",
    "PetTypeRepository",
    "SpecialtyRepository",
    "VetRepository",
    "VisitRepository",
]
