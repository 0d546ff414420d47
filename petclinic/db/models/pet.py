"""Module: pet."""

import uuid
from datetime import date, datetime

from sqlalchemy import Date, DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from petclinic.db.base import Base


# Pet profile; references its owner and its pet type by id.
class Pet(Base):
    __tablename__ = "pets"

    # Primary Key
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    # Basic Info
    name: Mapped[str] = mapped_column(String, nullable=False)
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    # References
    owner_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("owners.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    type_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("pet_types.id", ondelete="RESTRICT"),
        nullable=False,
    )

    # Audit
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
