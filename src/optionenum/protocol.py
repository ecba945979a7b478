"""
Capability interface for enumerations.

Any object satisfying ``EnumLike`` can stand in for ``Enumeration`` in form
builders and validators, whatever storage it uses internally.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from .models import EnumEntity, Option


@runtime_checkable
class EnumLike(Protocol):
    """Lookup and option-list queries over a fixed set of entities."""

    def get_entity_by_value(self, value: int | str) -> EnumEntity | None:
        """Entity registered under ``value``, or None."""
        ...

    def get_entity_by_key(self, key: str) -> EnumEntity | None:
        """Entity registered under ``key``, or None."""
        ...

    def get_text_from_key(self, key: str) -> str | None:
        """Display text of the entity with ``key``, or None."""
        ...

    def get_text_from_value(self, value: int | str) -> str | None:
        """Display text of the entity with ``value``, or None."""
        ...

    def to_value_array(self) -> list[int | str]:
        """All values in construction order."""
        ...

    def to_key_array(self) -> list[str]:
        """All keys in construction order."""
        ...

    def is_unknown_option(self, entity: EnumEntity) -> bool:
        """Whether ``entity`` is the reserved unknown entry."""
        ...

    def to_options(self, values: Iterable[int | str] | None = None) -> list[Option]:
        """UI options, optionally restricted to ``values``."""
        ...

    def to_omitted_options(self, values: Iterable[int | str]) -> list[Option]:
        """UI options excluding ``values``."""
        ...
