"""Tests for entity and option models."""

import pytest
from pydantic import ValidationError

from optionenum import EnumEntity, Option


class TestEnumEntity:
    def test_defaults(self) -> None:
        entity = EnumEntity()
        assert entity.key is None
        assert entity.value is None
        assert entity.text == ""

    def test_label_prefers_text(self) -> None:
        assert EnumEntity(key="K", text="Label").label == "Label"
        assert EnumEntity(key="K").label == "K"

    def test_str_value_is_not_coerced(self) -> None:
        assert EnumEntity(value="1").value == "1"
        assert EnumEntity(value=1).value == 1

    def test_rejects_float_value(self) -> None:
        with pytest.raises(ValidationError):
            EnumEntity(value=1.5)


class TestOption:
    def test_from_entity_uses_label(self) -> None:
        option = Option.from_entity(EnumEntity(key="K", value=3))
        assert option == Option(value=3, text="K")


class TestStrictValues:
    def test_null_text_becomes_empty(self) -> None:
        assert EnumEntity(key="K", text=None).text == ""

    def test_bool_value_rejected(self) -> None:
        with pytest.raises(ValidationError):
            EnumEntity(value=True)

    def test_numeric_string_stays_string(self) -> None:
        assert Option(value="2", text="Two").value == "2"
