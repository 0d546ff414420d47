import uuid
from datetime import date

from petclinic.db.models import Owner, Pet, Visit
from petclinic.db.repositories import (
    OwnerRepository,
    PetRepository,
    PetTypeRepository,
    SpecialtyRepository,
    VetRepository,
    VisitRepository,
)


class TestOwnerRepository:
    def test_saved_owner_is_retrievable(self, db):
        repo = OwnerRepository(db)
        saved = repo.save(Owner(first_name="Betty", last_name="Davis"))

        assert saved.id is not None
        found = repo.find_by_id(saved.id)
        assert found.first_name == "Betty"
        assert found.last_name == "Davis"

    def test_unknown_id_returns_none(self, db):
        assert OwnerRepository(db).find_by_id(uuid.uuid4()) is None

    def test_find_all_orders_by_name(self, db):
        repo = OwnerRepository(db)
        repo.save(Owner(first_name="Jean", last_name="Coleman"))
        repo.save(Owner(first_name="Eduardo", last_name="Rodriquez"))
        repo.save(Owner(first_name="Harold", last_name="Davis"))

        assert [o.last_name for o in repo.find_all()] == ["Coleman", "Davis", "Rodriquez"]

    def test_find_by_last_name_prefix_is_case_insensitive(self, db):
        repo = OwnerRepository(db)
        repo.save(Owner(first_name="Betty", last_name="Davis"))
        repo.save(Owner(first_name="Harold", last_name="Davis"))
        repo.save(Owner(first_name="Peter", last_name="McTavish"))

        assert {o.first_name for o in repo.find_by_last_name("da")} == {"Betty", "Harold"}
        assert repo.find_by_last_name("Zed") == []

    def test_blank_last_name_lists_everyone(self, db):
        repo = OwnerRepository(db)
        repo.save(Owner(first_name="Betty", last_name="Davis"))
        repo.save(Owner(first_name="Peter", last_name="McTavish"))

        assert len(repo.find_by_last_name("")) == 2
        assert len(repo.find_by_last_name(None)) == 2

    def test_like_wildcards_are_literal(self, db):
        repo = OwnerRepository(db)
        repo.save(Owner(first_name="Betty", last_name="Davis"))

        assert repo.find_by_last_name("%") == []
        assert repo.find_by_last_name("_avis") == []

    def test_save_updates_existing(self, db):
        repo = OwnerRepository(db)
        owner = repo.save(Owner(first_name="Betty", last_name="Davis"))
        owner.city = "Sun Prairie"
        repo.save(owner)

        assert len(repo.find_all()) == 1
        assert repo.find_by_id(owner.id).city == "Sun Prairie"

    def test_delete(self, db):
        repo = OwnerRepository(db)
        owner = repo.save(Owner(first_name="Betty", last_name="Davis"))
        repo.delete(owner)

        assert repo.find_by_id(owner.id) is None


class TestPetRepository:
    def test_saved_pet_is_retrievable(self, db, owner, dog):
        repo = PetRepository(db)
        pet = repo.save(Pet(name="Basil", birth_date=date(2012, 8, 6), owner_id=owner.id, type_id=dog.id))

        found = repo.find_by_id(pet.id)
        assert found.name == "Basil"
        assert found.birth_date == date(2012, 8, 6)
        assert found.owner_id == owner.id
        assert found.type_id == dog.id

    def test_find_by_owner_only_returns_that_owners_pets(self, db, owner, dog):
        other = OwnerRepository(db).save(Owner(first_name="Jean", last_name="Coleman"))
        repo = PetRepository(db)
        repo.save(Pet(name="Samantha", owner_id=other.id, type_id=dog.id))
        repo.save(Pet(name="Rosy", owner_id=owner.id, type_id=dog.id))
        repo.save(Pet(name="Jewel", owner_id=owner.id, type_id=dog.id))

        assert [p.name for p in repo.find_by_owner(owner.id)] == ["Jewel", "Rosy"]
        assert [p.name for p in repo.find_by_owner(other.id)] == ["Samantha"]


class TestVisitRepository:
    def test_saved_visit_is_retrievable(self, db, visit):
        found = VisitRepository(db).find_by_id(visit.id)
        assert found.description == "rabies shot"
        assert found.visit_date == date(2013, 1, 1)

    def test_visit_date_defaults_to_today(self, db, pet):
        saved = VisitRepository(db).save(Visit(pet_id=pet.id, description="check up"))
        assert saved.visit_date == date.today()

    def test_find_by_pet_newest_first(self, db, pet):
        repo = VisitRepository(db)
        repo.save(Visit(pet_id=pet.id, visit_date=date(2013, 1, 1), description="rabies shot"))
        repo.save(Visit(pet_id=pet.id, visit_date=date(2013, 1, 4), description="spayed"))

        assert [v.description for v in repo.find_by_pet(pet.id)] == ["spayed", "rabies shot"]

    def test_find_by_pet_ids(self, db, owner, pet, dog):
        other_pet = PetRepository(db).save(Pet(name="Max", owner_id=owner.id, type_id=dog.id))
        repo = VisitRepository(db)
        repo.save(Visit(pet_id=pet.id, visit_date=date(2013, 1, 1), description="a"))
        repo.save(Visit(pet_id=other_pet.id, visit_date=date(2013, 1, 2), description="b"))

        assert {v.description for v in repo.find_by_pet_ids([pet.id, other_pet.id])} == {"a", "b"}
        assert [v.description for v in repo.find_by_pet_ids([pet.id])] == ["a"]
        assert repo.find_by_pet_ids([]) == []


class TestReferenceRepositories:
    def test_pet_types_sorted_by_name(self, db):
        names = [t.name for t in PetTypeRepository(db).find_all()]
        assert names == sorted(names)
        assert "cat" in names and "dog" in names

    def test_vets_carry_specialties(self, db):
        vets = {f"{v.first_name} {v.last_name}": v for v in VetRepository(db).find_all()}
        assert [s.name for s in vets["Linda Douglas"].specialties] == ["dentistry", "surgery"]
        assert vets["James Carter"].specialties == []

    def test_specialty_by_name(self, db):
        assert SpecialtyRepository(db).find_by_name("radiology") is not None
        assert SpecialtyRepository(db).find_by_name("astrology") is None


class TestOwnerModel:
    def test_optional_fields_and_audit_column(self, db):
        owner = OwnerRepository(db).save(Owner(first_name="Betty", last_name="Davis"))

        assert owner.address is None
        assert owner.city is None
        assert owner.telephone is None
        assert owner.created_at is not None
