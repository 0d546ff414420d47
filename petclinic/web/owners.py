"""Module: owners."""

import logging

from fastapi import APIRouter, Depends, Form, HTTPException, Query, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from petclinic.api.v1.routes.deps import get_db, parse_uuid
from petclinic.db.models.owner import Owner
from petclinic.db.repositories import OwnerRepository
from petclinic.web.forms import OwnerForm
from petclinic.web.templating import templates
from petclinic.web.views import load_owner_details

logger = logging.getLogger(__name__)

router = APIRouter()


def _owner_form_fields(
    first_name: str = Form(default=""),
    last_name: str = Form(default=""),
    address: str = Form(default=""),
    city: str = Form(default=""),
    telephone: str = Form(default=""),
    id: str = Form(default=""),
) -> OwnerForm:
    return OwnerForm(
        first_name=first_name,
        last_name=last_name,
        address=address,
        city=city,
        telephone=telephone,
        id=id,
    )


def _get_owner_or_404(db: Session, owner_id: str) -> Owner:
    owner = OwnerRepository(db).find_by_id(parse_uuid(owner_id, "owner id"))
    if not owner:
        logger.warning("Owner %s not found", owner_id)
        raise HTTPException(status_code=404, detail="Owner not found")
    return owner


def _render_form(request: Request, form: OwnerForm, errors: dict | None = None, status_code: int = 200):
    return templates.TemplateResponse(
        request,
        "owners/edit.html",
        {"form": form, "errors": errors or {}, "is_new": not form.id},
        status_code=status_code,
    )


def _view_redirect(owner: Owner) -> RedirectResponse:
    return RedirectResponse(url=f"/owners/view?id={owner.id}", status_code=303)


# Page: owner list with optional last name filter.
@router.get("", summary="Owner list page")
def owners_index(
    request: Request,
    last_name: str | None = Query(default=None, alias="lastName"),
    db: Session = Depends(get_db),
):
    owners = OwnerRepository(db).find_by_last_name(last_name)
    return templates.TemplateResponse(
        request,
        "owners/index.html",
        {"owners": owners, "last_name": last_name or ""},
    )


# Page: blank owner form.
@router.get("/add", summary="New owner form")
def owners_add_form(request: Request):
    return _render_form(request, OwnerForm())


@router.post("/add", summary="Create owner")
def owners_add(request: Request, form: OwnerForm = Depends(_owner_form_fields), db: Session = Depends(get_db)):
    errors = form.validate()
    if errors:
        return _render_form(request, form, errors, status_code=400)

    owner = OwnerRepository(db).save(form.apply_to(Owner()))
    logger.info("Created owner %s", owner.id)
    return _view_redirect(owner)


# Page: owner form pre-filled with the stored record.
@router.get("/edit", summary="Edit owner form")
def owners_edit_form(request: Request, id: str = Query(...), db: Session = Depends(get_db)):
    owner = _get_owner_or_404(db, id)
    return _render_form(request, OwnerForm.from_owner(owner))


@router.post("/edit", summary="Update owner")
def owners_edit(request: Request, form: OwnerForm = Depends(_owner_form_fields), db: Session = Depends(get_db)):
    owner = _get_owner_or_404(db, form.id)
    errors = form.validate()
    if errors:
        return _render_form(request, form, errors, status_code=400)

    owner = OwnerRepository(db).save(form.apply_to(owner))
    logger.info("Updated owner %s", owner.id)
    return _view_redirect(owner)


# Page: owner detail with pets and their visits.
@router.get("/view", summary="Owner detail page")
def owners_view(request: Request, id: str = Query(...), db: Session = Depends(get_db)):
    details = load_owner_details(db, parse_uuid(id, "owner id"))
    if details is None:
        logger.warning("Owner %s not found", id)
        raise HTTPException(status_code=404, detail="Owner not found")
    return templates.TemplateResponse(request, "owners/view.html", {"details": details})
