"""
optionenum - immutable keyed enumerations with UI option helpers.

An enumeration is a fixed list of entities, each with a key, a value and
display text, looked up in both directions and projected into option lists
for select, radio and checkbox widgets.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .enumeration import Enumeration
from .errors import DuplicateKeyError, DuplicateValueError, EntityContext, OptionEnumError
from .models import UNKNOWN_KEY, EnumEntity, Option
from .protocol import EnumLike

try:
    __version__ = version("optionenum")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "Enumeration",
    "EnumLike",
    "EnumEntity",
    "Option",
    "UNKNOWN_KEY",
    "OptionEnumError",
    "DuplicateKeyError",
    "DuplicateValueError",
    "EntityContext",
]
