"""Module: main."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler, request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from petclinic.api.v1.api import api_router
from petclinic.core.config import settings
from petclinic.core.logging import configure_logging
from petclinic.db.init_db import init_db
from petclinic.db.session import SessionLocal
from petclinic.scripts.seed_data import seed_reference_data
from petclinic.web.router import web_router
from petclinic.web.templating import templates

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting %s", settings.app_name)
    init_db()
    if settings.seed_on_startup:
        session = SessionLocal()
        try:
            seed_reference_data(session)
        finally:
            session.close()
    yield
    logger.info("Shutting down %s", settings.app_name)


app = FastAPI(title=f"{settings.app_name} API", version="0.1.0", lifespan=lifespan)

app.include_router(api_router, prefix="/api/v1")
app.include_router(web_router)


def _wants_html(request: Request) -> bool:
    return not request.url.path.startswith("/api")


@app.exception_handler(StarletteHTTPException)
async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    # JSON API keeps FastAPI's {"detail": ...} body; pages get the error template.
    if not _wants_html(request):
        return await http_exception_handler(request, exc)
    return templates.TemplateResponse(
        request,
        "error.html",
        {"status_code": exc.status_code, "detail": exc.detail},
        status_code=exc.status_code,
    )


@app.exception_handler(RequestValidationError)
async def handle_validation_error(request: Request, exc: RequestValidationError):
    # Missing or malformed query/form parameters on a page, e.g. /owners/edit without ?id=.
    if not _wants_html(request):
        return await request_validation_exception_handler(request, exc)
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    return templates.TemplateResponse(
        request,
        "error.html",
        {"status_code": 422, "detail": f"Invalid request ({problems})"},
        status_code=422,
    )


@app.exception_handler(Exception)
async def handle_unexpected_exception(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return PlainTextResponse("Internal Server Error", status_code=500)
