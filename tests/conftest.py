"""Shared fixtures: in-memory SQLite store and a TestClient bound to it."""

import os
from datetime import date

# Settings are read at import time; provide them before importing the app.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SEED_ON_STARTUP", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from petclinic.api.v1.routes.deps import get_db
from petclinic.db.init_db import init_db
from petclinic.db.models import Owner, Pet, Visit
from petclinic.db.repositories import OwnerRepository, PetRepository, PetTypeRepository, VisitRepository
from petclinic.main import app
from petclinic.scripts.seed_data import seed_reference_data


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    seed_reference_data(session)
    yield session
    session.close()


@pytest.fixture
def client(db, session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def dog(db):
    return PetTypeRepository(db).find_by_name("dog")


@pytest.fixture
def owner(db):
    return OwnerRepository(db).save(
        Owner(first_name="George", last_name="Franklin", address="110 W. Liberty St.", city="Madison", telephone="6085551023")
    )


@pytest.fixture
def pet(db, owner, dog):
    return PetRepository(db).save(Pet(name="Leo", birth_date=date(2010, 9, 7), owner_id=owner.id, type_id=dog.id))


@pytest.fixture
def visit(db, pet):
    return VisitRepository(db).save(Visit(pet_id=pet.id, visit_date=date(2013, 1, 1), description="rabies shot"))
