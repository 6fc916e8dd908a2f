"""School schemas."""

from typing import Any, Literal

from pydantic import BaseModel, TypeAdapter

DraftField = Literal["name", "address", "phone"]


class School(BaseModel):
    """School as returned by the API."""

    id: int
    name: str
    address: str | None = None
    phone: str | None = None

    model_config = {"frozen": True}


class SchoolDraft(BaseModel):
    """In-progress values for a create or update request.

    The name may be blank while the draft is being composed; it is checked
    with ``has_name()`` when the draft is submitted.
    """

    name: str = ""
    address: str | None = ""
    phone: str | None = ""

    model_config = {"frozen": True}

    @classmethod
    def from_school(cls, school: School) -> "SchoolDraft":
        """Seed a draft from the current values of a row."""
        return cls(name=school.name, address=school.address, phone=school.phone)

    def has_name(self) -> bool:
        return bool(self.name and self.name.strip())

    def with_field(self, field: DraftField, value: str) -> "SchoolDraft":
        return self.model_copy(update={field: value})

    def to_payload(self) -> dict[str, Any]:
        """JSON body for POST/PUT; absent fields are omitted."""
        return self.model_dump(exclude_none=True)


SchoolList = TypeAdapter(list[School])
