"""Module: seed_data."""

import logging
import random
from datetime import date

from faker import Faker
from sqlalchemy.orm import Session

from petclinic.db.models.owner import Owner
from petclinic.db.models.pet import Pet
from petclinic.db.models.pet_type import PetType
from petclinic.db.models.vet import Specialty, Vet
from petclinic.db.models.visit import Visit
from petclinic.db.repositories import (
    OwnerRepository,
    PetRepository,
    PetTypeRepository,
    SpecialtyRepository,
    VetRepository,
    VisitRepository,
)

logger = logging.getLogger(__name__)

fake = Faker()

PET_TYPES = ["bird", "cat", "dog", "hamster", "lizard", "snake"]
SPECIALTIES = ["dentistry", "radiology", "surgery"]

# (first name, last name, specialties)
VETS = [
    ("James", "Carter", []),
    ("Helen", "Leary", ["radiology"]),
    ("Linda", "Douglas", ["dentistry", "surgery"]),
    ("Rafael", "Ortega", ["surgery"]),
    ("Henry", "Stevens", ["radiology"]),
    ("Sharon", "Jenkins", []),
]

VISIT_REASONS = ["rabies shot", "neutered", "spayed", "annual check", "dental clean", "vaccination booster"]


def seed_reference_data(session: Session) -> dict[str, int]:
    """
    Insert pet types, specialties and vets that are missing.

    Safe to call on every startup; existing rows are left untouched.
    """
    type_repo = PetTypeRepository(session)
    specialty_repo = SpecialtyRepository(session)
    vet_repo = VetRepository(session)

    pet_type_n = 0
    for name in PET_TYPES:
        if type_repo.find_by_name(name) is None:
            type_repo.save(PetType(name=name))
            pet_type_n += 1

    specialties = {}
    specialty_n = 0
    for name in SPECIALTIES:
        specialty = specialty_repo.find_by_name(name)
        if specialty is None:
            specialty = specialty_repo.save(Specialty(name=name))
            specialty_n += 1
        specialties[name] = specialty

    vet_n = 0
    existing = {(v.first_name, v.last_name) for v in vet_repo.find_all()}
    for first_name, last_name, names in VETS:
        if (first_name, last_name) in existing:
            continue
        vet_repo.save(
            Vet(
                first_name=first_name,
                last_name=last_name,
                specialties=[specialties[n] for n in names],
            )
        )
        vet_n += 1

    if pet_type_n or specialty_n or vet_n:
        logger.info("Seeded pet_types=%s, specialties=%s, vets=%s", pet_type_n, specialty_n, vet_n)
    return {"pet_types": pet_type_n, "specialties": specialty_n, "vets": vet_n}


def seed_sample_data(session: Session, owners: int = 10, seed: int | None = None) -> dict[str, int]:
    # Random owners, each with up to three pets and a few visits per pet.
    if seed is not None:
        Faker.seed(seed)
        random.seed(seed)

    seed_reference_data(session)
    pet_types = PetTypeRepository(session).find_all()
    owner_repo = OwnerRepository(session)
    pet_repo = PetRepository(session)
    visit_repo = VisitRepository(session)

    owner_n = pet_n = visit_n = 0
    for _ in range(owners):
        owner = owner_repo.save(
            Owner(
                first_name=fake.first_name(),
                last_name=fake.last_name(),
                address=fake.street_address(),
                city=fake.city(),
                telephone=fake.numerify("##########"),
            )
        )
        owner_n += 1

        for _ in range(random.randint(1, 3)):
            birth_date = fake.date_between(start_date="-15y", end_date="-3m")
            pet = pet_repo.save(
                Pet(
                    name=fake.first_name(),
                    birth_date=birth_date,
                    owner_id=owner.id,
                    type_id=random.choice(pet_types).id,
                )
            )
            pet_n += 1

            for _ in range(random.randint(0, 3)):
                visit_date = fake.date_between(start_date=birth_date, end_date=date.today())
                visit_repo.save(
                    Visit(
                        pet_id=pet.id,
                        visit_date=visit_date,
                        description=random.choice(VISIT_REASONS),
                    )
                )
                visit_n += 1

    return {"owners": owner_n, "pets": pet_n, "visits": visit_n}


if __name__ == "__main__":
    # Local reseed: python -m petclinic.scripts.seed_data
    from petclinic.core.logging import configure_logging
    from petclinic.db.init_db import init_db
    from petclinic.db.session import SessionLocal

    configure_logging()
    init_db()
    session = SessionLocal()
    try:
        print("Seeding reference data and sample owners...")
        counts = seed_sample_data(session, owners=10)
        print(f"Done. owners={counts['owners']}, pets={counts['pets']}, visits={counts['visits']}")
    finally:
        session.close()
