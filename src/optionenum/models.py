"""
Entity and option models for optionenum.

An ``EnumEntity`` is one named constant of an enumeration. Descriptors
handed to ``Enumeration`` may omit ``key`` and ``value``; the enumeration
stores resolved copies with both fields populated.

An ``Option`` is the UI-facing projection of an entity, as consumed by
select, radio and checkbox builders.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr, field_validator

# Entities with this key are never projected into UI options.
UNKNOWN_KEY = "UNKNOWN"


class EnumEntity(BaseModel):
    """
    A single named constant.

    Attributes:
        key: Symbolic identifier, defaults to ``text`` when omitted
        value: Stored value, an int or a str; bools and floats are rejected
            rather than coerced. Defaults to the positional index as a string
        text: Human-readable label; ``None`` is treated as empty
        disabled: Marks the derived option as disabled when set
    """

    key: str | None = None
    value: StrictInt | StrictStr | None = None
    text: str = ""
    disabled: bool | None = None

    model_config = ConfigDict(frozen=True)

    @field_validator("text", mode="before")
    @classmethod
    def coerce_null_text(cls, v: Any) -> Any:
        return "" if v is None else v

    @property
    def label(self) -> str:
        """Display text, falling back to the key."""
        return self.text or self.key or ""


class Option(BaseModel):
    """A select/radio/checkbox choice derived from an entity."""

    value: StrictInt | StrictStr
    text: str
    disabled: bool | None = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_entity(cls, entity: EnumEntity) -> Option:
        return cls(value=entity.value, text=entity.label, disabled=entity.disabled)

    def as_dict(self) -> dict[str, Any]:
        """Plain dict for templates and JSON payloads; ``disabled`` only if set."""
        return self.model_dump(exclude_none=True)
