"""Module: templating."""

from pathlib import Path

from fastapi.templating import Jinja2Templates

from petclinic.core.formatting import format_date

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
# {{ pet.birth_date | date }} -> 01/01/1970
templates.env.filters["date"] = format_date
