"""Module: router."""

from fastapi import APIRouter, Request

from petclinic.web.owners import router as owners_router
from petclinic.web.pets import router as pets_router
from petclinic.web.templating import templates
from petclinic.web.vets import router as vets_router
from petclinic.web.visits import router as visits_router

web_router = APIRouter(include_in_schema=False)


# Page: landing page.
@web_router.get("/")
def welcome(request: Request):
    return templates.TemplateResponse(request, "welcome.html", {})


web_router.include_router(owners_router, prefix="/owners")
web_router.include_router(pets_router, prefix="/pets")
web_router.include_router(visits_router, prefix="/visits")
web_router.include_router(vets_router, prefix="/vets")
