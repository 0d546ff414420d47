"""Module: vets."""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from petclinic.api.v1.routes.deps import get_db
from petclinic.db.repositories import VetRepository
from petclinic.web.templating import templates

router = APIRouter()


# Page: vets and their specialties.
@router.get("", summary="Vet list page")
def vets_index(request: Request, db: Session = Depends(get_db)):
    return templates.TemplateResponse(request, "vets/index.html", {"vets": VetRepository(db).find_all()})
