"""Pydantic models describing form templates and their field schema.

A field definition is a tagged variant keyed by ``kind``. Each variant carries
only the constraints that make sense for it, so the answer validator can
dispatch exhaustively on the question type derived from it.
"""
from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class _FieldBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(description="Key the collected answer is stored under")
    title: str = Field(description="Short label shown to the user")
    description: str = Field(default="", description="Longer explanation used as the prompt")


class TextField(_FieldBase):
    kind: Literal["text"] = "text"
    min_length: Optional[int] = Field(default=None, ge=0)
    max_length: Optional[int] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def check_bounds(self):
        if self.min_length is not None and self.max_length is not None and self.min_length > self.max_length:
            raise ValueError(f"{self.name}: min_length is greater than max_length")
        return self


class NumberField(_FieldBase):
    kind: Literal["number"] = "number"
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    default: Optional[float] = None


class DateField(_FieldBase):
    kind: Literal["date"] = "date"


class BooleanField(_FieldBase):
    kind: Literal["boolean"] = "boolean"
    default: Optional[bool] = None


class ChoiceField(_FieldBase):
    kind: Literal["choice"] = "choice"
    options: Tuple[str, ...]

    @field_validator("options")
    @classmethod
    def check_options(cls, v):
        if not v:
            raise ValueError("choice fields need at least one option")
        return v


FieldDefinition = Annotated[
    Union[TextField, NumberField, DateField, BooleanField, ChoiceField],
    Field(discriminator="kind"),
]


class Template(BaseModel):
    """An immutable, schema-described form the assistant can suggest or fill."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1, description="Stable unique key, e.g. ``loan-form``")
    title: str
    description: str
    fields: Tuple[FieldDefinition, ...] = Field(description="Field schema in declaration order")
    required: Tuple[str, ...] = ()
    keywords: Tuple[str, ...] = ()
    scenarios: Tuple[str, ...] = Field(default=(), description="Example phrases, display only")

    @model_validator(mode="after")
    def check_schema(self):
        names = [f.name for f in self.fields]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"template {self.id!r} declares fields more than once: {duplicates}")
        unknown = [n for n in self.required if n not in names]
        if unknown:
            raise ValueError(f"template {self.id!r} requires undeclared fields: {unknown}")
        return self

    @property
    def field_names(self) -> List[str]:
        return [f.name for f in self.fields]

    def get_field(self, name: str):
        for f in self.fields:
            if f.name == name:
                return f
        return None

    def is_required(self, name: str) -> bool:
        return name in self.required


class CatalogDocument(BaseModel):
    """Top-level shape of a serialized catalog file."""

    model_config = ConfigDict(extra="forbid")

    templates: List[Template]

    @model_validator(mode="after")
    def check_unique_ids(self):
        seen = set()
        for template in self.templates:
            if template.id in seen:
                raise ValueError(f"duplicate template id: {template.id!r}")
            seen.add(template.id)
        return self
