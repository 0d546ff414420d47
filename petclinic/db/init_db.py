import logging

from sqlalchemy.engine import Engine

from petclinic.db.base import Base
from petclinic.db.session import engine as default_engine

# IMPORTANT: import models so they register with Base.metadata
import petclinic.db.models  # noqa: F401

logger = logging.getLogger(__name__)


def init_db(engine: Engine | None = None) -> None:
    bind = engine or default_engine
    Base.metadata.create_all(bind=bind)
    logger.info("Database schema ready (%s tables)", len(Base.metadata.tables))
