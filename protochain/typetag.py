"""Type tag resolution for prototypes, I/O handles and plain values."""
from __future__ import annotations

from collections.abc import Mapping, Set
import io
from numbers import Number
from typing import Any

from .constants import CLOSED_FILE_KIND, FILE_KIND, NIL_KIND, TABLE_KIND, TYPE_KEY


def metatable(value: Any) -> Mapping | None:
    """Return the private metadata attached to ``value``, if any."""

    mt = getattr(type(value), "__metatable__", None)
    if mt is None:
        return None
    mt = getattr(value, "__metatable__", None)
    return mt if isinstance(mt, Mapping) else None


def io_kind(value: Any) -> str | None:
    if isinstance(value, io.IOBase):
        return CLOSED_FILE_KIND if value.closed else FILE_KIND
    return None


def primitive_kind(value: Any) -> str:
    """Map a Python value onto the small set of primitive kind names."""

    if value is None:
        return NIL_KIND
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, Number):
        return "number"
    if isinstance(value, (str, bytes)):
        return "string"
    if isinstance(value, (Mapping, list, tuple, Set)):
        return TABLE_KIND
    if callable(value):
        return "function"
    return type(value).__name__


def type_of(value: Any) -> str:
    """Return the declared type name of ``value``.

    An explicit ``_type`` tag wins, then the kind of an I/O handle, then
    the primitive kind. Never raises.
    """

    mt = metatable(value)
    if mt is not None:
        tag = mt.get(TYPE_KEY)
        if isinstance(tag, str):
            return tag
    kind = io_kind(value)
    if kind is not None:
        return kind
    return primitive_kind(value)


__all__ = [
    "io_kind",
    "metatable",
    "primitive_kind",
    "type_of",
]
