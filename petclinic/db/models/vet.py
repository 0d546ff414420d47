"""Module: vet."""

import uuid

from sqlalchemy import Column, ForeignKey, String, Table, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petclinic.db.base import Base

vet_specialties = Table(
    "vet_specialties",
    Base.metadata,
    Column("vet_id", Uuid, ForeignKey("vets.id", ondelete="CASCADE"), primary_key=True),
    Column("specialty_id", Uuid, ForeignKey("specialties.id", ondelete="CASCADE"), primary_key=True),
)


class Specialty(Base):
    __tablename__ = "specialties"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String, unique=True, nullable=False)


class Vet(Base):
    __tablename__ = "vets"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    first_name: Mapped[str] = mapped_column(String, nullable=False)
    last_name: Mapped[str] = mapped_column(String, nullable=False)

    # Loaded eagerly; the vets page always shows them.
    specialties: Mapped[list[Specialty]] = relationship(
        secondary=vet_specialties,
        lazy="selectin",
        order_by=Specialty.name,
    )
