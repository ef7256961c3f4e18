"""Declared argument signatures and the ``argscheck`` wrapper."""
from __future__ import annotations

from dataclasses import dataclass, field
import functools
import re
from typing import Any, Callable

from .config import DebugSettings, get_settings
from .constants import NIL_KIND
from .debug import MISSING, argerror, toomanyargerror
from .typetag import metatable, primitive_kind, type_of

DECLARATION_PATTERN = re.compile(
    r"^\s*(?P<name>[A-Za-z_][A-Za-z0-9_.]*)\s*\((?P<params>[^)]*)\)\s*$"
)

TYPE_NAME_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_.]*$")


def _matches(type_name: str, value: Any) -> bool:
    if type_name == "any":
        return value is not None
    if type_name == NIL_KIND:
        return value is None
    if type_name == "object":
        return metatable(value) is not None
    if type_name == "table" and metatable(value) is None:
        return primitive_kind(value) == "table"
    return type_of(value) == type_name


@dataclass(frozen=True)
class ParamSpec:
    """One declared parameter: its accepted type names and optionality."""

    types: tuple
    optional: bool = False

    @classmethod
    def parse(cls, text: str) -> "ParamSpec":
        entry = text.strip()
        optional = entry.startswith("?")
        if optional:
            entry = entry[1:].strip()
        types = tuple(t.strip() for t in entry.split("|") if t.strip())
        if not types:
            raise ValueError(f"Empty parameter declaration: {text!r}")
        for name in types:
            if not TYPE_NAME_PATTERN.match(name):
                raise ValueError(f"Invalid type name in parameter declaration: {name!r}")
        return cls(types, optional)

    def describe(self) -> str:
        names = list(self.types)
        if self.optional and NIL_KIND not in names:
            names.append(NIL_KIND)
        return " or ".join(names)

    def accepts(self, value: Any) -> bool:
        if value is None and self.optional:
            return True
        return any(_matches(name, value) for name in self.types)


@dataclass
class Signature:
    """A parsed ``"module.function (type, ?type|type, ...)"`` declaration."""

    name: str
    params: list = field(default_factory=list)
    variadic: bool = False

    def __post_init__(self):
        self.name = (self.name or "").strip()
        if not self.name:
            raise ValueError("Signature declaration requires a name")

    @property
    def arity(self) -> int:
        return len(self.params)

    def validate(self, args: tuple) -> None:
        for index, param in enumerate(self.params, start=1):
            value = args[index - 1] if index <= len(args) else MISSING
            if value is MISSING and param.optional:
                continue
            if value is MISSING or not param.accepts(value):
                argerror(self.name, index, param.describe(), value)
        if not self.variadic and len(args) > self.arity:
            toomanyargerror(self.name, self.arity, len(args))


def parse_declaration(decl: str) -> Signature:
    match = DECLARATION_PATTERN.match(decl or "")
    if not match:
        raise ValueError(f"Invalid argument declaration: {decl}")
    entries = [p.strip() for p in match.group("params").split(",") if p.strip()]
    variadic = bool(entries) and entries[-1] == "..."
    if variadic:
        entries = entries[:-1]
    return Signature(
        match.group("name"),
        [ParamSpec.parse(entry) for entry in entries],
        variadic,
    )


def argscheck(
    decl: str, fn: Callable[..., Any], settings: DebugSettings | None = None
) -> Callable[..., Any]:
    """Return ``fn`` wrapped to validate positional arguments against ``decl``.

    With argument checking disabled in the debug settings, ``fn`` is
    returned untouched.
    """

    settings = settings or get_settings()
    if not settings.argcheck:
        return fn
    signature = parse_declaration(decl)

    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        signature.validate(args)
        return fn(*args, **kwargs)

    wrapper.__signature_decl__ = signature
    return wrapper


def check_args(
    module_name: str,
    function_name: str,
    signature: str,
    fn: Callable[..., Any],
    settings: DebugSettings | None = None,
) -> Callable[..., Any]:
    return argscheck(f"{module_name}.{function_name} {signature}", fn, settings)


__all__ = [
    "DECLARATION_PATTERN",
    "ParamSpec",
    "Signature",
    "argscheck",
    "check_args",
    "parse_declaration",
]
