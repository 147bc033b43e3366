"""Resource, record and property models handed to the view layer.

The data-access layer owns these objects; the view layer only reads them.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Property(BaseModel):
    """A named, typed field on a resource's schema."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    type: str = "string"
    label: str | None = None
    is_sortable: bool = True

    @model_validator(mode="before")
    @classmethod
    def default_label(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("label") and data.get("name"):
            data = {**data, "label": str(data["name"]).replace("_", " ").title()}
        return data


class RecordError(BaseModel):
    """Validation error attached to one property of a record."""

    model_config = ConfigDict(frozen=True)

    message: str
    type: str | None = None


class Record(BaseModel):
    """One data instance of a resource."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    id: str
    params: dict[str, Any] = Field(default_factory=dict)
    errors: dict[str, RecordError] = Field(default_factory=dict)

    def param(self, path: str) -> Any:
        """Return the value stored under ``path``.

        A flat key (``"address.city"`` stored as-is) wins over walking nested
        mappings. Missing paths return None.
        """
        if path in self.params:
            return self.params[path]

        value: Any = self.params
        for part in path.split("."):
            if not isinstance(value, Mapping) or part not in value:
                return None
            value = value[part]
        return value

    def error(self, path: str) -> RecordError | None:
        return self.errors.get(path)


class Resource(BaseModel):
    """A named collection of records with a stable routing identifier."""

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    id: str = Field(min_length=1)
    name: str | None = None
    properties: list[Property] = Field(default_factory=list)
