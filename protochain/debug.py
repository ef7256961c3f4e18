"""Argument error messages and raisers shared by protochain modules.

Deprecated helpers that used to live here are merged back into this
namespace at import time while their support window lasts.
"""
from __future__ import annotations

from typing import Any

from .constants import NO_VALUE
from .deprecation import install_deprecated
from .errors import BadArgument, TooManyArguments
from .typetag import type_of


class _Missing:
    """Marker for an argument that was not passed at all."""

    def __repr__(self) -> str:  # pragma: no cover - representation helper
        return "<missing>"


MISSING = _Missing()


def describe(value: Any) -> str:
    if value is MISSING:
        return NO_VALUE
    return type_of(value)


def extramsg_mismatch(expected: str, actual: Any = MISSING, index: int | None = None) -> str:
    """Return ``"<expected> expected, got <actual>"``.

    With ``index``, the mismatch is reported for an element inside a
    container argument.
    """

    got = describe(actual)
    if index is not None:
        got = f"{got} at index {index}"
    return f"{expected} expected, got {got}"


def extramsg_toomany(bad: str, expected: int, actual: int) -> str:
    plural = "" if expected == 1 else "s"
    return f"no more than {expected} {bad}{plural} expected, got {actual}"


def argerror(name: str, index: int, expected: str, actual: Any = MISSING) -> None:
    """Raise :class:`BadArgument` for argument ``index`` of ``name``."""

    message = f"bad argument #{index} to '{name}' ({extramsg_mismatch(expected, actual)})"
    raise BadArgument(
        message,
        function=name,
        index=index,
        expected=expected,
        actual=describe(actual),
    )


def toomanyargerror(name: str, expected: int, actual: int) -> None:
    message = f"too many arguments to '{name}' (no more than {expected} expected, got {actual})"
    raise TooManyArguments(
        message,
        function=name,
        index=expected + 1,
        expected=expected,
        actual=actual,
    )


__all__ = [
    "MISSING",
    "argerror",
    "describe",
    "extramsg_mismatch",
    "extramsg_toomany",
    "toomanyargerror",
]


install_deprecated("debug", globals())
