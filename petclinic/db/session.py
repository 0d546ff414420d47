"""Module: session."""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from petclinic.core.config import settings


def _connect_args(url: str) -> dict:
    # SQLite connections are shared across the framework threadpool.
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    settings.database_url,
    echo=settings.sql_echo,
    pool_pre_ping=True,
    connect_args=_connect_args(settings.database_url),
)

SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
