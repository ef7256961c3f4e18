"""Error conditions raised by the protochain object model."""
from __future__ import annotations

from typing import Any


class ProtochainError(Exception):
    """Base class for every condition raised by protochain."""


class InvalidArgument(ProtochainError, TypeError):
    """A clone or merge was handed data it has no way to interpret."""


class BadArgument(ProtochainError, TypeError):
    """A call violated its declared argument signature."""

    def __init__(
        self,
        message: str,
        *,
        function: str,
        index: int,
        expected: Any = None,
        actual: Any = None,
    ) -> None:
        super().__init__(message)
        self.function = function
        self.index = index
        self.expected = expected
        self.actual = actual

    @property
    def module_name(self) -> str:
        return self.function.rpartition(".")[0]

    @property
    def function_name(self) -> str:
        return self.function.rpartition(".")[2]


class TooManyArguments(BadArgument):
    """More positional arguments were passed than the signature accepts."""


__all__ = [
    "BadArgument",
    "InvalidArgument",
    "ProtochainError",
    "TooManyArguments",
]
