"""Module: owners."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, StringConstraints
from sqlalchemy.orm import Session

from petclinic.api.v1.routes.deps import get_db, parse_uuid
from petclinic.db.models.owner import Owner
from petclinic.db.repositories import OwnerRepository, PetRepository, PetTypeRepository

router = APIRouter()

# Required text: surrounding whitespace is stripped before the length check.
NameText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)]


class OwnerPayload(BaseModel):
    first_name: NameText
    last_name: NameText
    address: str | None = None
    city: str | None = None
    telephone: str | None = None


def _normalize_optional(value: str | None) -> str | None:
    if value is None:
        return None
    cleaned = value.strip()
    return cleaned if cleaned else None


def owner_to_dict(owner: Owner) -> dict:
    return {
        "id": str(owner.id),
        "first_name": owner.first_name,
        "last_name": owner.last_name,
        "address": owner.address,
        "city": owner.city,
        "telephone": owner.telephone,
    }


def _apply_payload(owner: Owner, payload: OwnerPayload) -> None:
    owner.first_name = payload.first_name.strip()
    owner.last_name = payload.last_name.strip()
    owner.address = _normalize_optional(payload.address)
    owner.city = _normalize_optional(payload.city)
    owner.telephone = _normalize_optional(payload.telephone)


def _get_owner_or_404(db: Session, owner_id: str) -> Owner:
    owner = OwnerRepository(db).find_by_id(parse_uuid(owner_id, "owner_id"))
    if not owner:
        raise HTTPException(status_code=404, detail="Owner not found")
    return owner


# Endpoint: handles HTTP request/response mapping for this route.
@router.get("", summary="List owners, optionally by last name prefix")
def list_owners(last_name: str | None = None, db: Session = Depends(get_db)):
    return [owner_to_dict(o) for o in OwnerRepository(db).find_by_last_name(last_name)]


# Endpoint: handles HTTP request/response mapping for this route.
@router.post("", status_code=201, summary="Create owner")
def create_owner(payload: OwnerPayload, db: Session = Depends(get_db)):
    owner = Owner()
    _apply_payload(owner, payload)
    owner = OwnerRepository(db).save(owner)
    return owner_to_dict(owner)


# Endpoint: handles HTTP request/response mapping for this route.
@router.get("/{owner_id}", summary="Get owner detail")
def get_owner(owner_id: str, db: Session = Depends(get_db)):
    return owner_to_dict(_get_owner_or_404(db, owner_id))


# Endpoint: handles HTTP request/response mapping for this route.
@router.put("/{owner_id}", summary="Update owner")
def update_owner(owner_id: str, payload: OwnerPayload, db: Session = Depends(get_db)):
    owner = _get_owner_or_404(db, owner_id)
    _apply_payload(owner, payload)
    owner = OwnerRepository(db).save(owner)
    return owner_to_dict(owner)


# Endpoint: handles HTTP request/response mapping for this route.
@router.get("/{owner_id}/pets", summary="List pets for owner")
def list_owner_pets(owner_id: str, db: Session = Depends(get_db)):
    owner = _get_owner_or_404(db, owner_id)
    type_names = {t.id: t.name for t in PetTypeRepository(db).find_all()}
    out = []
    for pet in PetRepository(db).find_by_owner(owner.id):
        out.append(
            {
                "id": str(pet.id),
                "name": pet.name,
                "birth_date": pet.birth_date,
                "type": type_names.get(pet.type_id),
                "owner_id": str(pet.owner_id),
            }
        )
    return out
