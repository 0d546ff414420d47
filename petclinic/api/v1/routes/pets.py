"""Module: pets."""

from __future__ import annotations

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, StringConstraints
from sqlalchemy.orm import Session

from petclinic.api.v1.routes.deps import get_db, parse_uuid
from petclinic.db.models.pet import Pet
from petclinic.db.models.visit import Visit
from petclinic.db.repositories import OwnerRepository, PetRepository, PetTypeRepository, VisitRepository

router = APIRouter()

# Required text: surrounding whitespace is stripped before the length check.
NameText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)]
DescriptionText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=4000)]


class PetCreatePayload(BaseModel):
    owner_id: str
    type_id: str
    name: NameText
    birth_date: date | None = None


class PetUpdatePayload(BaseModel):
    type_id: str
    name: NameText
    birth_date: date | None = None


class VisitCreatePayload(BaseModel):
    visit_date: date | None = None
    description: DescriptionText


# -------------------------
# Helpers
# -------------------------
def pet_to_dict(pet: Pet) -> dict:
    return {
        "id": str(pet.id),
        "name": pet.name,
        "birth_date": pet.birth_date,
        "owner_id": str(pet.owner_id),
        "type_id": str(pet.type_id),
    }


def visit_to_dict(visit: Visit) -> dict:
    return {
        "id": str(visit.id),
        "pet_id": str(visit.pet_id),
        "visit_date": visit.visit_date,
        "description": visit.description,
    }


def _get_pet_or_404(db: Session, pet_id: str) -> Pet:
    pet = PetRepository(db).find_by_id(parse_uuid(pet_id, "pet_id"))
    if not pet:
        raise HTTPException(status_code=404, detail="Pet not found")
    return pet


def _ensure_pet_type(db: Session, type_id: str):
    pet_type = PetTypeRepository(db).find_by_id(parse_uuid(type_id, "type_id"))
    if not pet_type:
        raise HTTPException(status_code=404, detail="Pet type not found")
    return pet_type


# -------------------------
# Endpoints
# -------------------------

@router.post("", status_code=201, summary="Create pet for an owner")
def create_pet(payload: PetCreatePayload, db: Session = Depends(get_db)):
    owner = OwnerRepository(db).find_by_id(parse_uuid(payload.owner_id, "owner_id"))
    if not owner:
        raise HTTPException(status_code=404, detail="Owner not found")
    pet_type = _ensure_pet_type(db, payload.type_id)

    pet = Pet(
        name=payload.name.strip(),
        birth_date=payload.birth_date,
        owner_id=owner.id,
        type_id=pet_type.id,
    )
    pet = PetRepository(db).save(pet)
    return pet_to_dict(pet)


@router.get("/{pet_id}", summary="Get pet detail")
def get_pet(pet_id: str, db: Session = Depends(get_db)):
    return pet_to_dict(_get_pet_or_404(db, pet_id))


@router.put("/{pet_id}", summary="Update pet details")
def update_pet(pet_id: str, payload: PetUpdatePayload, db: Session = Depends(get_db)):
    pet = _get_pet_or_404(db, pet_id)
    pet_type = _ensure_pet_type(db, payload.type_id)

    pet.name = payload.name.strip()
    pet.birth_date = payload.birth_date
    pet.type_id = pet_type.id
    pet = PetRepository(db).save(pet)
    return pet_to_dict(pet)


@router.get("/{pet_id}/visits", summary="List visits for a pet")
def list_pet_visits(pet_id: str, db: Session = Depends(get_db)):
    pet = _get_pet_or_404(db, pet_id)
    return [visit_to_dict(v) for v in VisitRepository(db).find_by_pet(pet.id)]


@router.post("/{pet_id}/visits", status_code=201, summary="Add visit for a pet")
def create_pet_visit(pet_id: str, payload: VisitCreatePayload, db: Session = Depends(get_db)):
    pet = _get_pet_or_404(db, pet_id)
    visit = Visit(
        pet_id=pet.id,
        visit_date=payload.visit_date or date.today(),
        description=payload.description.strip(),
    )
    visit = VisitRepository(db).save(visit)
    return visit_to_dict(visit)
