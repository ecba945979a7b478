"""
Fixed, immutable enumeration of keyed constants.

Usage:
    from optionenum import Enumeration

    Color = Enumeration(
        [
            {"key": "RED", "value": 1, "text": "Red"},
            {"key": "BLUE", "value": 2, "text": "Blue"},
        ]
    )

    Color.get_entity_by_key("RED").value  # 1
    Color.get_text_from_value(2)  # "Blue"
    Color.to_options([2])  # [Option(value=2, text="Blue")]
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from .errors import DuplicateKeyError, DuplicateValueError, EntityContext
from .models import UNKNOWN_KEY, EnumEntity, Option

logger = logging.getLogger(__name__)

EntityDescriptor = EnumEntity | Mapping[str, Any]


class Enumeration:
    """
    An ordered set of entities indexed by key and by value.

    Built in one pass from a sequence of descriptors and never mutated
    afterwards, so instances can be shared across threads without locking.

    Raises:
        DuplicateValueError: two descriptors resolve to the same value
        DuplicateKeyError: two descriptors resolve to the same key
    """

    _entities: tuple[EnumEntity, ...]
    _value_index: Mapping[int | str, EnumEntity]
    _key_index: Mapping[str, EnumEntity]

    def __init__(self, entities: Iterable[EntityDescriptor] | None = None):
        resolved: list[EnumEntity] = []
        value_index: dict[int | str, EnumEntity] = {}
        key_index: dict[str, EnumEntity] = {}

        for index, descriptor in enumerate(entities or ()):
            entity = _resolve(descriptor, index)
            context = EntityContext(index=index, key=entity.key, value=entity.value)

            if entity.value in value_index:
                logger.debug(f"Duplicate value {entity.value!r} at entity #{index}")
                raise DuplicateValueError(entity.value, context)
            if entity.key in key_index:
                logger.debug(f"Duplicate key {entity.key!r} at entity #{index}")
                raise DuplicateKeyError(entity.key, context)

            value_index[entity.value] = entity
            key_index[entity.key] = entity
            resolved.append(entity)

        object.__setattr__(self, "_entities", tuple(resolved))
        object.__setattr__(self, "_value_index", MappingProxyType(value_index))
        object.__setattr__(self, "_key_index", MappingProxyType(key_index))
        logger.debug(f"Built enumeration with {len(resolved)} entities")

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # -------------------------------------------------------------------------
    # Lookup
    #
    # Unmatched keys and values return None. Arguments must be hashable like
    # any key or value; an unhashable argument raises TypeError.
    # -------------------------------------------------------------------------

    def get_entity_by_value(self, value: int | str) -> EnumEntity | None:
        return self._value_index.get(value)

    def get_entity_by_key(self, key: str) -> EnumEntity | None:
        return self._key_index.get(key)

    def get_text_from_key(self, key: str) -> str | None:
        entity = self._key_index.get(key)
        return entity.label if entity else None

    def get_text_from_value(self, value: int | str) -> str | None:
        entity = self._value_index.get(value)
        return entity.label if entity else None

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def to_value_array(self) -> list[int | str]:
        return [e.value for e in self._entities]

    def to_key_array(self) -> list[str]:
        return [e.key or e.text for e in self._entities]

    def is_unknown_option(self, entity: EnumEntity) -> bool:
        """Unknown entries exist for stored data only; UIs never offer them."""
        return entity.key == UNKNOWN_KEY

    def to_options(self, values: Iterable[int | str] | None = None) -> list[Option]:
        """
        Build select/radio/checkbox options in construction order.

        Args:
            values: Restrict the result to entities with these values

        Returns:
            Options for every non-unknown entity passing the filter
        """
        allowed = None if values is None else frozenset(values)
        return [
            Option.from_entity(e)
            for e in self._entities
            if not self.is_unknown_option(e) and (allowed is None or e.value in allowed)
        ]

    def to_omitted_options(self, values: Iterable[int | str]) -> list[Option]:
        """Options for every non-unknown entity whose value is not in ``values``."""
        excluded = frozenset(values)
        return [
            Option.from_entity(e)
            for e in self._entities
            if not self.is_unknown_option(e) and e.value not in excluded
        ]

    # -------------------------------------------------------------------------
    # Container protocol
    # -------------------------------------------------------------------------

    @property
    def entities(self) -> tuple[EnumEntity, ...]:
        """Resolved entities in construction order."""
        return self._entities

    def __iter__(self) -> Iterator[EnumEntity]:
        return iter(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, value: object) -> bool:
        return value in self._value_index

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._key_index)!r})"


def _resolve(descriptor: EntityDescriptor, index: int) -> EnumEntity:
    """Fill in the key (from text) and value (from index) of a descriptor."""
    entity = (
        descriptor
        if isinstance(descriptor, EnumEntity)
        else EnumEntity.model_validate(dict(descriptor))
    )
    key = entity.key or entity.text
    value = entity.value if entity.value is not None else str(index)
    return entity.model_copy(update={"key": key, "value": value})
