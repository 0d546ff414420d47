"""Module: forms.

Plain containers for submitted HTML forms. Only required-field presence
and date syntax are checked; each ``validate`` returns a field -> message
mapping that the templates render next to the inputs.
"""

from dataclasses import dataclass, field
from datetime import date

from petclinic.core.formatting import DATE_FORMAT, format_date, parse_date
from petclinic.db.models.owner import Owner
from petclinic.db.models.pet import Pet

REQUIRED = "is required"
INVALID_DATE = "must be a date like 01/01/1970"

# Human-readable hint shown beside date inputs.
DATE_HINT = DATE_FORMAT.replace("%d", "DD").replace("%m", "MM").replace("%Y", "YYYY")


def _clean(value: str | None) -> str:
    return (value or "").strip()


@dataclass
class OwnerForm:
    first_name: str = ""
    last_name: str = ""
    address: str = ""
    city: str = ""
    telephone: str = ""
    id: str = ""

    @classmethod
    def from_owner(cls, owner: Owner) -> "OwnerForm":
        return cls(
            first_name=owner.first_name,
            last_name=owner.last_name,
            address=owner.address or "",
            city=owner.city or "",
            telephone=owner.telephone or "",
            id=str(owner.id),
        )

    def validate(self) -> dict[str, str]:
        errors = {}
        if not _clean(self.first_name):
            errors["first_name"] = REQUIRED
        if not _clean(self.last_name):
            errors["last_name"] = REQUIRED
        return errors

    def apply_to(self, owner: Owner) -> Owner:
        owner.first_name = _clean(self.first_name)
        owner.last_name = _clean(self.last_name)
        owner.address = _clean(self.address) or None
        owner.city = _clean(self.city) or None
        owner.telephone = _clean(self.telephone) or None
        return owner


@dataclass
class PetForm:
    owner_id: str = ""
    name: str = ""
    birth_date: str = ""
    type_id: str = ""
    id: str = ""
    parsed_birth_date: date | None = field(default=None, repr=False)

    @classmethod
    def from_pet(cls, pet: Pet) -> "PetForm":
        return cls(
            owner_id=str(pet.owner_id),
            name=pet.name,
            birth_date=format_date(pet.birth_date),
            type_id=str(pet.type_id),
            id=str(pet.id),
            parsed_birth_date=pet.birth_date,
        )

    def validate(self) -> dict[str, str]:
        errors = {}
        if not _clean(self.name):
            errors["name"] = REQUIRED
        if not _clean(self.type_id):
            errors["type_id"] = REQUIRED
        try:
            self.parsed_birth_date = parse_date(self.birth_date)
        except ValueError:
            errors["birth_date"] = INVALID_DATE
        return errors


@dataclass
class VisitForm:
    pet_id: str = ""
    visit_date: str = ""
    description: str = ""
    parsed_visit_date: date | None = field(default=None, repr=False)

    def validate(self) -> dict[str, str]:
        errors = {}
        if not _clean(self.description):
            errors["description"] = REQUIRED
        try:
            self.parsed_visit_date = parse_date(self.visit_date)
        except ValueError:
            errors["visit_date"] = INVALID_DATE
        return errors
