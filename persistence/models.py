from __future__ import annotations

from datetime import date, datetime
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_serializer

BIRTHDATE_FORMAT = "%m/%d/%Y"


class Entity(BaseModel):
    """
    One record inside a collection.

    Unknown fields are kept as-is (explicit nulls included) so a read/write cycle
    never drops data; declared optional fields left unset are not written back as null.
    """

    model_config = ConfigDict(extra="allow")

    @model_serializer(mode="wrap")
    def _drop_unset_optionals(self, handler):
        data = handler(self)
        declared = type(self).model_fields
        return {k: v for k, v in data.items() if not (k in declared and v is None)}


class Firestation(Entity):
    address: str
    station: int


class Person(Entity):
    firstName: str
    lastName: str
    address: str | None = None
    city: str | None = None
    zip: str | None = None
    phone: str | None = None
    email: str | None = None


class MedicalRecord(Entity):
    firstName: str
    lastName: str
    birthdate: date | None = None
    medications: list[str] = Field(default_factory=list)
    allergies: list[str] = Field(default_factory=list)

    @field_validator("birthdate", mode="before")
    @classmethod
    def _parse_birthdate(cls, value: Any) -> Any:
        # Data file uses MM/dd/yyyy; anything else falls through to pydantic's ISO parsing.
        if isinstance(value, str):
            try:
                return datetime.strptime(value.strip(), BIRTHDATE_FORMAT).date()
            except ValueError:
                return value
        return value

    @field_serializer("birthdate")
    def _format_birthdate(self, value: date | None) -> str | None:
        return value.strftime(BIRTHDATE_FORMAT) if value is not None else None


class Document(BaseModel):
    """
    Mirrors the on-disk data.json schema:
      {
        "persons": [ {...} ],
        "firestations": [ {...} ],
        "medicalrecords": [ {...} ]
      }
    Only the structural shape is checked here (arrays of objects); records are
    typed per collection on access, so one malformed record never hides the
    other collections. Other top-level keys are carried through untouched.
    """

    model_config = ConfigDict(extra="allow")

    persons: list[dict[str, Any]] = Field(default_factory=list)
    firestations: list[dict[str, Any]] = Field(default_factory=list)
    medicalrecords: list[dict[str, Any]] = Field(default_factory=list)

    @field_validator("persons", "firestations", "medicalrecords", mode="before")
    @classmethod
    def _null_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @classmethod
    def from_disk_doc(cls, doc: Mapping[str, Any]) -> "Document":
        return cls.model_validate(dict(doc))

    def to_disk_doc(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


class MissingDocument:
    """Returned by the store when the backing file is absent or blank."""

    __slots__ = ()

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING_DOCUMENT"


MISSING_DOCUMENT = MissingDocument()
