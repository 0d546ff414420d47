"""Module: visits."""

import logging
from datetime import date

from fastapi import APIRouter, Depends, Form, HTTPException, Query, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from petclinic.api.v1.routes.deps import get_db, parse_uuid
from petclinic.core.formatting import format_date
from petclinic.db.models.pet import Pet
from petclinic.db.models.visit import Visit
from petclinic.db.repositories import OwnerRepository, PetRepository, PetTypeRepository, VisitRepository
from petclinic.web.forms import DATE_HINT, VisitForm
from petclinic.web.templating import templates

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_pet_or_404(db: Session, pet_id: str) -> Pet:
    pet = PetRepository(db).find_by_id(parse_uuid(pet_id, "pet id"))
    if not pet:
        raise HTTPException(status_code=404, detail="Pet not found")
    return pet


def _render_form(request: Request, db: Session, pet: Pet, form: VisitForm, errors: dict | None = None, status_code: int = 200):
    pet_type = PetTypeRepository(db).find_by_id(pet.type_id)
    return templates.TemplateResponse(
        request,
        "visits/add.html",
        {
            "pet": pet,
            "pet_type": pet_type.name if pet_type else None,
            "owner": OwnerRepository(db).find_by_id(pet.owner_id),
            "visits": VisitRepository(db).find_by_pet(pet.id),
            "form": form,
            "errors": errors or {},
            "date_hint": DATE_HINT,
        },
        status_code=status_code,
    )


# Page: new visit form, listing the pet's earlier visits.
@router.get("/add", summary="New visit form")
def visits_add_form(request: Request, pet_id: str = Query(..., alias="petId"), db: Session = Depends(get_db)):
    pet = _get_pet_or_404(db, pet_id)
    form = VisitForm(pet_id=str(pet.id), visit_date=format_date(date.today()))
    return _render_form(request, db, pet, form)


@router.post("/add", summary="Create visit")
def visits_add(
    request: Request,
    pet_id: str = Form(default=""),
    visit_date: str = Form(default=""),
    description: str = Form(default=""),
    db: Session = Depends(get_db),
):
    pet = _get_pet_or_404(db, pet_id)
    form = VisitForm(pet_id=str(pet.id), visit_date=visit_date, description=description)
    errors = form.validate()
    if errors:
        return _render_form(request, db, pet, form, errors, status_code=400)

    visit = Visit(
        pet_id=pet.id,
        visit_date=form.parsed_visit_date or date.today(),
        description=form.description.strip(),
    )
    visit = VisitRepository(db).save(visit)
    logger.info("Created visit %s for pet %s", visit.id, pet.id)
    return RedirectResponse(url=f"/owners/view?id={pet.owner_id}", status_code=303)
