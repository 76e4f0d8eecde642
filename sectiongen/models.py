"""Data models for registry assets.

Assets are built once from a registry JSON payload and never mutated.
``source``, ``schema`` and ``description`` may be empty or null; null is
read as an empty string, and empty bodies are skipped when files are
written.
"""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .naming import ensure_safe_name


class BaseFile(BaseModel):
    """The minimal unit of generated content."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    name: str = Field(description="File stem, without extension")
    source: str = Field(description="Literal file body, written verbatim")
    description: str = ""

    @field_validator("name")
    @classmethod
    def _name_is_safe(cls, value: str) -> str:
        return ensure_safe_name(value)

    @field_validator("source", "description", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class Component(BaseFile):
    """A reusable UI fragment with no further nesting."""

    type: Literal["component"] = "component"


class SectionComponent(BaseFile):
    """A top-level section with an optional schema and nested components."""

    type: Literal["section"] = "section"
    schema_source: str = Field(default="", alias="schema")
    components: Optional[list[Component]] = None

    @field_validator("schema_source", mode="before")
    @classmethod
    def _null_schema_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @model_validator(mode="after")
    def _component_names_unique(self) -> "SectionComponent":
        if self.components:
            seen: set[str] = set()
            for component in self.components:
                if component.name in seen:
                    raise ValueError(f"duplicate component name {component.name!r}")
                seen.add(component.name)
        return self
