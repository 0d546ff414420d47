import uuid
from datetime import date

from petclinic.db.repositories import PetRepository, PetTypeRepository


class TestAddPet:
    def test_form_lists_pet_types(self, client, owner):
        response = client.get("/pets/add", params={"ownerId": str(owner.id)})

        assert response.status_code == 200
        assert "George Franklin" in response.text
        for name in ("bird", "cat", "dog", "hamster", "lizard", "snake"):
            assert f">{name}</option>" in response.text

    def test_unknown_owner_is_404(self, client):
        response = client.get("/pets/add", params={"ownerId": str(uuid.uuid4())})
        assert response.status_code == 404

    def test_create(self, client, db, owner):
        cat = PetTypeRepository(db).find_by_name("cat")
        response = client.post(
            "/pets/add",
            data={"owner_id": str(owner.id), "name": "Max", "birth_date": "01/01/1970", "type_id": str(cat.id)},
            follow_redirects=False,
        )

        assert response.status_code == 303
        assert response.headers["location"] == f"/owners/view?id={owner.id}"
        db.expire_all()
        pets = PetRepository(db).find_by_owner(owner.id)
        assert [(p.name, p.birth_date, p.type_id) for p in pets] == [("Max", date(1970, 1, 1), cat.id)]

    def test_birth_date_is_optional(self, client, db, owner, dog):
        response = client.post(
            "/pets/add",
            data={"owner_id": str(owner.id), "name": "Max", "type_id": str(dog.id)},
            follow_redirects=False,
        )

        assert response.status_code == 303
        db.expire_all()
        assert PetRepository(db).find_by_owner(owner.id)[0].birth_date is None

    def test_invalid_form(self, client, db, owner):
        response = client.post(
            "/pets/add",
            data={"owner_id": str(owner.id), "name": "", "birth_date": "1970-01-01", "type_id": str(uuid.uuid4())},
        )

        assert response.status_code == 400
        assert "Name is required" in response.text
        assert "Birth date must be a date like 01/01/1970" in response.text
        assert "Type is not a known pet type" in response.text
        assert PetRepository(db).find_by_owner(owner.id) == []

    def test_garbage_type_id_is_a_form_error(self, client, owner):
        response = client.post("/pets/add", data={"owner_id": str(owner.id), "name": "Max", "type_id": "fish"})

        assert response.status_code == 400
        assert "Type is not a known pet type" in response.text


class TestEditPet:
    def test_form_prefilled(self, client, pet, dog):
        response = client.get("/pets/edit", params={"id": str(pet.id)})

        assert response.status_code == 200
        assert 'value="Leo"' in response.text
        assert 'value="07/09/2010"' in response.text
        assert f'<option value="{dog.id}" selected>' in response.text

    def test_update(self, client, db, owner, pet):
        cat = PetTypeRepository(db).find_by_name("cat")
        response = client.post(
            "/pets/edit",
            data={"id": str(pet.id), "name": "Leonardo", "birth_date": "08/09/2010", "type_id": str(cat.id)},
            follow_redirects=False,
        )

        assert response.status_code == 303
        assert response.headers["location"] == f"/owners/view?id={owner.id}"
        db.expire_all()
        updated = PetRepository(db).find_by_id(pet.id)
        assert updated.name == "Leonardo"
        assert updated.birth_date == date(2010, 9, 8)
        assert updated.type_id == cat.id
        assert updated.owner_id == owner.id

    def test_unknown_pet_is_404(self, client):
        response = client.get("/pets/edit", params={"id": str(uuid.uuid4())})
        assert response.status_code == 404
