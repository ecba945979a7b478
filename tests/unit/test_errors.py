"""Tests for optionenum error formatting."""

from optionenum import DuplicateKeyError, DuplicateValueError, EntityContext, OptionEnumError


def test_message_without_context() -> None:
    err = OptionEnumError("boom")
    assert str(err) == "boom"
    assert err.context is None


def test_context_prefix() -> None:
    context = EntityContext(index=2, key="RED", value=1)
    assert context.format() == "entity #2 (key='RED', value=1)"


def test_duplicate_value_message() -> None:
    err = DuplicateValueError(1, EntityContext(index=3, key="B", value=1))
    assert str(err) == "entity #3 (key='B', value=1): Enum already has value: 1"


def test_duplicate_key_message() -> None:
    err = DuplicateKeyError("Foo")
    assert err.key == "Foo"
    assert str(err) == "Enum already has key: 'Foo'"
