"""Pydantic schemas for employees and store notifications."""
from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic.alias_generators import to_camel

TEXT_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "phone",
    "department",
    "position",
    "date_of_employment",
    "date_of_birth",
)

SEARCHABLE_FIELDS = ("first_name", "last_name", "email", "department", "position")


class EmployeeInput(BaseModel):
    """Employee fields as entered by a caller; ``id`` is never accepted here.

    Values are coerced to text and missing ones default to ``""`` so the
    store can hold unvalidated data as-is.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    department: str = ""
    position: str = ""
    date_of_employment: str = ""
    date_of_birth: str = ""

    @field_validator(*TEXT_FIELDS, mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)


class Employee(EmployeeInput):
    """A stored employee record."""

    id: int = Field(gt=0)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class EmployeesChanged(BaseModel):
    """Payload published after every successful store mutation."""

    model_config = ConfigDict(frozen=True)

    employees: tuple[Employee, ...]

    def to_json_payload(self) -> Dict[str, Any]:
        return {"employees": [e.model_dump(mode="json", by_alias=True) for e in self.employees]}


class LanguageChanged(BaseModel):
    """Payload published when the active display locale changes."""

    model_config = ConfigDict(frozen=True)

    language: str


class EmployeePage(BaseModel):
    """One page of employees returned by the API."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    items: List[Employee]
    total_pages: int
    current_page: int
    has_next: bool
    has_prev: bool
    total_items: int


class LanguageRead(BaseModel):
    language: str
    available: List[str]


class LanguageUpdate(BaseModel):
    language: str


EMPLOYEE_LIST = TypeAdapter(List[Employee])
