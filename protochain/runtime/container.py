"""Container prototype: cloning, field storage and public iteration.

Every prototype is a :class:`Prototype` value. Calling one clones it::

    Node = Container(_type="Node")
    node = Node({"a": 1})
    other = node(a=2, b=3)          # Node {a=2, b=3}

Keys that start with ``_`` are private. They are kept in the metadata
of the clone (see ``__metatable__``) and never show up as fields. The
reserved private keys are ``_type`` (type tag), ``_init`` (names bound
to positional arguments, in order) and ``_methods`` (methods shared by
every clone).
"""
from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType, MethodType
from typing import Any, Callable, Iterator

from ..constants import (
    CONTAINER_TYPE,
    INIT_KEY,
    MAPFIELDS_KEY,
    METHODS_KEY,
    PRIVATE_PREFIX,
    TYPE_KEY,
)
from ..errors import InvalidArgument
from ..typetag import type_of


def is_private_key(key: Any) -> bool:
    return isinstance(key, str) and key.startswith(PRIVATE_PREFIX)


def _is_sequence_key(key: Any) -> bool:
    return isinstance(key, int) and not isinstance(key, bool)


def _ordered_keys(fields: Mapping) -> list:
    positional = sorted(k for k in fields if _is_sequence_key(k))
    named = [k for k in fields if not _is_sequence_key(k)]
    return positional + named


def is_table_like(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple, Prototype))


def _iter_fields(fields: Mapping) -> Iterator[tuple[Any, Any]]:
    for key in _ordered_keys(fields):
        yield key, fields[key]


def iterate_public(value: Any) -> Iterator[tuple[Any, Any]]:
    """Return an iterator of ``(key, value)`` over the public fields of ``value``.

    Integer keys come first in ascending order, followed by the named
    keys in insertion order. Private fields of a prototype are never
    produced. Plain mappings and lists are iterated as tables, so a
    clone source can be read the same way whatever its kind.

    Every call starts a new pass. Assigning fields while a pass is in
    flight has undefined effect on that pass.
    """

    if isinstance(value, Prototype):
        return _iter_fields(value._fields)
    if isinstance(value, Mapping):
        return _iter_fields(value)
    if isinstance(value, (list, tuple)):
        return enumerate(value)
    raise InvalidArgument(f"cannot iterate the fields of a {type_of(value)} value")


def mapfields(
    new: Any, src: Any, rename: Mapping | None = None
) -> tuple[dict, dict]:
    """Merge ``src`` over the fields of ``new``.

    Keys of ``src`` are first renamed through ``rename`` (``{old: new}``;
    unmapped keys pass through). Renamed keys starting with ``_`` go to
    the private table, all others overwrite the public fields copied from
    ``new``. A prototype ``src`` is read through :func:`iterate_public`,
    so its private state is never copied.

    Returns ``(public, private)``; neither shares storage with ``new``.
    """

    if not is_table_like(src):
        raise InvalidArgument(
            f"cannot merge fields from a {type_of(src)} value; "
            "expected a table or a prototype instance"
        )
    rename = rename or {}
    public = dict(iterate_public(new))
    private = {}
    for key, value in iterate_public(src):
        key = rename.get(key, key)
        if is_private_key(key):
            private[key] = value
        else:
            public[key] = value
    return public, private


def _normalize_init(init: Any) -> tuple:
    if init is None:
        return ()
    if isinstance(init, (str, bytes)) or not isinstance(init, (list, tuple)):
        raise InvalidArgument(
            f"_init must be a sequence of field names, not a {type_of(init)} value"
        )
    names = tuple(init)
    for name in names:
        if not isinstance(name, str):
            raise InvalidArgument(f"_init field names must be strings, got {type_of(name)}")
    if len(set(names)) != len(names):
        raise InvalidArgument(f"_init declares duplicate field names: {list(names)}")
    return names


def _normalize_private(parent_meta: Mapping, private: Mapping) -> dict:
    private = dict(private)
    if TYPE_KEY in private and not isinstance(private[TYPE_KEY], str):
        raise InvalidArgument(f"_type must be a string, got {type_of(private[TYPE_KEY])}")
    if INIT_KEY in private:
        private[INIT_KEY] = _normalize_init(private[INIT_KEY])
    if METHODS_KEY in private:
        methods = private[METHODS_KEY]
        if not isinstance(methods, Mapping):
            raise InvalidArgument(f"_methods must be a mapping, got {type_of(methods)}")
        inherited = parent_meta.get(METHODS_KEY)
        if isinstance(inherited, Mapping):
            methods = {**inherited, **methods}
        uncallable = sorted(str(k) for k, fn in methods.items() if not callable(fn))
        if uncallable:
            raise InvalidArgument(f"_methods entries must be callable: {uncallable}")
        private[METHODS_KEY] = MappingProxyType(dict(methods))
    return private


def _check_merge_result(result: Any) -> tuple[dict, dict]:
    try:
        public, private = result
    except (TypeError, ValueError):
        raise InvalidArgument(
            "mapfields must return a (public, private) pair of mappings"
        ) from None
    if not isinstance(public, Mapping) or not isinstance(private, Mapping):
        raise InvalidArgument("mapfields must return a (public, private) pair of mappings")
    leaked = [k for k in public if is_private_key(k)]
    if leaked:
        raise InvalidArgument(f"mapfields returned private keys as public fields: {leaked}")
    stray = [k for k in private if not is_private_key(k)]
    if stray:
        raise InvalidArgument(f"mapfields returned public keys as private fields: {stray}")
    return dict(public), dict(private)


def _source(proto: "Prototype", args: tuple, kwargs: dict) -> Any:
    if len(args) == 1 and is_table_like(args[0]):
        src = args[0]
    elif args:
        if not proto._meta.get(INIT_KEY):
            raise InvalidArgument(
                f"{type_of(proto)} declares no _init field names, so "
                f"{len(args)} positional argument(s) cannot be bound"
            )
        src = dict(enumerate(args))
    else:
        src = {}
    if kwargs:
        merged = dict(iterate_public(src))
        merged.update(kwargs)
        src = merged
    return src


def merge_override(proto: "Prototype") -> Callable[..., Any]:
    """Return the field merge function used when cloning ``proto``.

    A callable ``mapfields`` field wins over a ``mapfields`` method,
    which wins over the default :func:`mapfields`.
    """

    candidate = proto._fields.get(MAPFIELDS_KEY)
    if callable(candidate):
        return candidate
    methods = proto._meta.get(METHODS_KEY) or {}
    candidate = methods.get(MAPFIELDS_KEY)
    if callable(candidate):
        return candidate
    return mapfields


def clone(proto: "Prototype", /, *args, **kwargs) -> "Prototype":
    """Return a new instance cloned from ``proto``.

    ``proto(table)`` merges a mapping, list or prototype instance;
    ``proto(v0, v1, ...)`` binds positional values to the names declared
    in ``_init``; keyword fields are merged last and win on collision.
    """

    if not isinstance(proto, Prototype):
        raise InvalidArgument(f"cannot clone a {type_of(proto)} value")
    skeleton = type(proto)(proto._fields, proto._meta, proto)
    src = _source(proto, args, kwargs)
    rename = dict(enumerate(proto._meta.get(INIT_KEY) or ()))
    public, private = _check_merge_result(merge_override(proto)(skeleton, src, rename))

    meta = dict(proto._meta)
    meta.update(_normalize_private(proto._meta, private))
    object.__setattr__(skeleton, "_fields", public)
    object.__setattr__(skeleton, "_meta", meta)
    return skeleton


class Prototype:
    """A value that is at once a type tag, a field template and a constructor.

    Public fields are read as attributes or items. Methods come from the
    ``_methods`` table shared by every clone. The set of fields is fixed
    once an instance is built; only their values may be reassigned.
    """

    __slots__ = ("_fields", "_meta", "_parent")

    def __init__(
        self,
        fields: Mapping | None = None,
        meta: Mapping | None = None,
        parent: "Prototype | None" = None,
    ) -> None:
        object.__setattr__(self, "_fields", dict(fields or {}))
        object.__setattr__(self, "_meta", dict(meta or {}))
        object.__setattr__(self, "_parent", parent)

    def __call__(self, /, *args, **kwargs) -> "Prototype":
        return clone(self, *args, **kwargs)

    @property
    def __metatable__(self) -> Mapping:
        return MappingProxyType(self._meta)

    @property
    def __prototype__(self) -> "Prototype | None":
        return self._parent

    def __getattr__(self, name: str) -> Any:
        if is_private_key(name):
            raise AttributeError(name)
        fields = self._fields
        if name in fields:
            return fields[name]
        methods = self._meta.get(METHODS_KEY)
        if methods is not None and name in methods:
            return MethodType(methods[name], self)
        raise AttributeError(f"{type_of(self)} has no field or method {name!r}")

    def __setattr__(self, name: str, value: Any) -> None:
        if name not in self._fields:
            raise AttributeError(
                f"cannot add field {name!r} to {type_of(self)}; fields are fixed once cloned"
            )
        self._fields[name] = value

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"cannot delete field {name!r} from {type_of(self)}")

    def __getitem__(self, key: Any) -> Any:
        try:
            return self._fields[key]
        except KeyError:
            raise KeyError(key) from None

    def __setitem__(self, key: Any, value: Any) -> None:
        if key not in self._fields:
            raise KeyError(key)
        self._fields[key] = value

    def __delitem__(self, key: Any) -> None:
        raise KeyError(f"cannot delete field {key!r} from {type_of(self)}")

    def __contains__(self, key: Any) -> bool:
        return key in self._fields

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return iterate_public(self)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Prototype):
            return NotImplemented
        return type_of(self) == type_of(other) and self._fields == other._fields

    __hash__ = None

    def __repr__(self) -> str:
        parts = []
        for key, value in iterate_public(self):
            label = key if isinstance(key, str) else f"[{key!r}]"
            parts.append(f"{label}={value!r}")
        return f"{type_of(self)} {{{', '.join(parts)}}}"


prototype = Prototype(meta={TYPE_KEY: CONTAINER_TYPE})


__all__ = [
    "Prototype",
    "clone",
    "is_private_key",
    "is_table_like",
    "iterate_public",
    "mapfields",
    "merge_override",
    "prototype",
]
