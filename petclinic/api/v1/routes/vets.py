"""Module: vets."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from petclinic.api.v1.routes.deps import get_db
from petclinic.db.repositories import PetTypeRepository, VetRepository

router = APIRouter()


# Endpoint: vets with their specialty names.
@router.get("/vets", summary="List vets")
def list_vets(db: Session = Depends(get_db)):
    return [
        {
            "id": str(v.id),
            "first_name": v.first_name,
            "last_name": v.last_name,
            "specialties": [s.name for s in v.specialties],
        }
        for v in VetRepository(db).find_all()
    ]


# Endpoint: pet type choices used by pet create/update payloads.
@router.get("/pettypes", summary="List pet types")
def list_pet_types(db: Session = Depends(get_db)):
    return [{"id": str(t.id), "name": t.name} for t in PetTypeRepository(db).find_all()]
