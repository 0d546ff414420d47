"""Module: deps."""

import uuid
from typing import Generator

from fastapi import HTTPException
from sqlalchemy.orm import Session

from petclinic.db.session import SessionLocal


# Dependency provider: one DB session per request lifecycle.
def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# Validate and coerce UUID inputs from query/path payloads.
def parse_uuid(value: str, field_name: str = "id") -> uuid.UUID:
    try:
        return uuid.UUID(value)
    except (TypeError, ValueError):
        raise HTTPException(status_code=400, detail=f"Invalid {field_name} (must be UUID)")
