"""Module: api."""

# petclinic/api/v1/api.py
from fastapi import APIRouter

from petclinic.api.v1.routes.health import router as health_router
from petclinic.api.v1.routes.owners import router as owners_router
from petclinic.api.v1.routes.pets import router as pets_router
from petclinic.api.v1.routes.vets import router as vets_router

api_router = APIRouter()

# Register operational endpoints first for service-level concerns.
api_router.include_router(health_router, prefix="/health", tags=["health"])

# Register clinic endpoints.
api_router.include_router(owners_router, prefix="/owners", tags=["owners"])
api_router.include_router(pets_router, prefix="/pets", tags=["pets"])
api_router.include_router(vets_router, tags=["vets"])
