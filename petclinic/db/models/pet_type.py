"""Module: pet_type."""

import uuid

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from petclinic.db.base import Base


# Lookup of species offered in the pet form (cat, dog, ...).
class PetType(Base):
    __tablename__ = "pet_types"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String, unique=True, nullable=False)
