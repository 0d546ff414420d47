# petclinic/db/models/__init__.py

from petclinic.db.models.owner import Owner
from petclinic.db.models.pet_type import PetType
from petclinic.db.models.pet import Pet
from petclinic.db.models.visit import Visit
from petclinic.db.models.vet import Specialty, Vet, vet_specialties

__all__ = ["Owner", "PetType", "Pet", "Visit", "Specialty", "Vet", "vet_specialties"]
