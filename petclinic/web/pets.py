"""Module: pets."""

import logging
import uuid

from fastapi import APIRouter, Depends, Form, HTTPException, Query, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from petclinic.api.v1.routes.deps import get_db, parse_uuid
from petclinic.db.models.owner import Owner
from petclinic.db.models.pet import Pet
from petclinic.db.repositories import OwnerRepository, PetRepository, PetTypeRepository
from petclinic.web.forms import DATE_HINT, PetForm
from petclinic.web.templating import templates

logger = logging.getLogger(__name__)

router = APIRouter()


def _pet_form_fields(
    owner_id: str = Form(default=""),
    name: str = Form(default=""),
    birth_date: str = Form(default=""),
    type_id: str = Form(default=""),
    id: str = Form(default=""),
) -> PetForm:
    return PetForm(owner_id=owner_id, name=name, birth_date=birth_date, type_id=type_id, id=id)


def _get_owner_or_404(db: Session, owner_id: str) -> Owner:
    owner = OwnerRepository(db).find_by_id(parse_uuid(owner_id, "owner id"))
    if not owner:
        raise HTTPException(status_code=404, detail="Owner not found")
    return owner


def _get_pet_or_404(db: Session, pet_id: str) -> Pet:
    pet = PetRepository(db).find_by_id(parse_uuid(pet_id, "pet id"))
    if not pet:
        raise HTTPException(status_code=404, detail="Pet not found")
    return pet


def _render_form(
    request: Request,
    db: Session,
    owner: Owner,
    form: PetForm,
    errors: dict | None = None,
    status_code: int = 200,
):
    return templates.TemplateResponse(
        request,
        "pets/edit.html",
        {
            "owner": owner,
            "form": form,
            "errors": errors or {},
            "pet_types": PetTypeRepository(db).find_all(),
            "date_hint": DATE_HINT,
            "is_new": not form.id,
        },
        status_code=status_code,
    )


def _check_form(db: Session, form: PetForm) -> dict:
    errors = form.validate()
    if "type_id" not in errors:
        try:
            pet_type = PetTypeRepository(db).find_by_id(uuid.UUID(form.type_id))
        except ValueError:
            pet_type = None
        if pet_type is None:
            errors["type_id"] = "is not a known pet type"
    return errors


def _apply(form: PetForm, pet: Pet) -> Pet:
    pet.name = form.name.strip()
    pet.birth_date = form.parsed_birth_date
    pet.type_id = uuid.UUID(form.type_id)
    return pet


# Page: new pet form for an owner.
@router.get("/add", summary="New pet form")
def pets_add_form(request: Request, owner_id: str = Query(..., alias="ownerId"), db: Session = Depends(get_db)):
    owner = _get_owner_or_404(db, owner_id)
    return _render_form(request, db, owner, PetForm(owner_id=str(owner.id)))


@router.post("/add", summary="Create pet")
def pets_add(request: Request, form: PetForm = Depends(_pet_form_fields), db: Session = Depends(get_db)):
    owner = _get_owner_or_404(db, form.owner_id)
    errors = _check_form(db, form)
    if errors:
        return _render_form(request, db, owner, form, errors, status_code=400)

    pet = PetRepository(db).save(_apply(form, Pet(owner_id=owner.id)))
    logger.info("Created pet %s for owner %s", pet.id, owner.id)
    return RedirectResponse(url=f"/owners/view?id={owner.id}", status_code=303)


# Page: pet form pre-filled with the stored record.
@router.get("/edit", summary="Edit pet form")
def pets_edit_form(request: Request, id: str = Query(...), db: Session = Depends(get_db)):
    pet = _get_pet_or_404(db, id)
    owner = _get_owner_or_404(db, str(pet.owner_id))
    return _render_form(request, db, owner, PetForm.from_pet(pet))


@router.post("/edit", summary="Update pet")
def pets_edit(request: Request, form: PetForm = Depends(_pet_form_fields), db: Session = Depends(get_db)):
    pet = _get_pet_or_404(db, form.id)
    owner = _get_owner_or_404(db, str(pet.owner_id))
    form.owner_id = str(owner.id)
    errors = _check_form(db, form)
    if errors:
        return _render_form(request, db, owner, form, errors, status_code=400)

    pet = PetRepository(db).save(_apply(form, pet))
    logger.info("Updated pet %s", pet.id)
    return RedirectResponse(url=f"/owners/view?id={owner.id}", status_code=303)
