"""Merge deprecated API tables back into the live namespaces.

Deprecated symbols are declared statically, one support window per
release under :mod:`protochain.delete_after`. They are folded into a
single process-wide table the first time it is needed, and from there
into the globals of each namespace module, never replacing a name the
module already defines.
"""
from __future__ import annotations

from collections.abc import Mapping, MutableMapping
import threading
from types import MappingProxyType
from typing import Any, Iterator

import networkx as nx

from .config import DebugSettings, get_settings
from .logging_config import get_logger

logger = get_logger(__name__)


def acyclic_merge(dest: MutableMapping, src: Mapping) -> MutableMapping:
    """Merge ``src`` into ``dest`` without overwriting anything in ``dest``.

    Nested mappings are merged recursively, creating empty mappings in
    ``dest`` as needed. A subtree is skipped when ``dest`` already holds
    a non-mapping value at that key, and leaves are only installed where
    ``dest`` has no entry. ``src`` must be a finite tree with no
    references back into ``dest``; that is not checked here.
    """

    for key, value in src.items():
        if isinstance(value, Mapping):
            if key not in dest:
                dest[key] = {}
            target = dest[key]
            if isinstance(target, MutableMapping):
                acyclic_merge(target, value)
        elif key not in dest:
            dest[key] = value
    return dest


def table_graph(table: Mapping) -> nx.MultiDiGraph:
    """Return the containment graph of the mappings nested in ``table``.

    Nodes are mapping identities; an edge runs from each mapping to every
    mapping stored directly inside it, once per key holding it.
    """

    graph = nx.MultiDiGraph()
    graph.add_node(id(table))
    seen = {id(table)}
    stack = [table]
    while stack:
        current = stack.pop()
        for value in current.values():
            if not isinstance(value, Mapping):
                continue
            graph.add_edge(id(current), id(value))
            if id(value) not in seen:
                seen.add(id(value))
                stack.append(value)
    return graph


def ensure_tree(table: Mapping) -> Mapping:
    """Raise ``ValueError`` unless ``table`` nests as a tree of distinct mappings."""

    if not nx.is_arborescence(table_graph(table)):
        raise ValueError("Deprecated API table must be a tree without shared or cyclic subtables")
    return table


def _freeze(table: Mapping) -> Mapping:
    return MappingProxyType(
        {
            key: _freeze(value) if isinstance(value, Mapping) else value
            for key, value in table.items()
        }
    )


def _prune(table: Mapping) -> dict:
    # A retired symbol whose wrapper was suppressed comes back as None.
    pruned = {}
    for key, value in table.items():
        if isinstance(value, Mapping):
            pruned[key] = _prune(value)
        elif value is not None:
            pruned[key] = value
    return pruned


def build_deprecated_api(settings: DebugSettings | None = None) -> Mapping | None:
    """Fold every support window into one read-only table.

    Returns ``None`` when deprecated APIs are disabled.
    """

    from .delete_after import SUPPORT_WINDOWS

    settings = settings or get_settings()
    if settings.deprecate:
        logger.debug("Deprecated API support disabled")
        return None

    api: dict = {}
    for window in SUPPORT_WINDOWS:
        table = _prune(window.deprecated_api(settings))
        if settings.strict:
            ensure_tree(table)
        acyclic_merge(api, table)
        logger.debug("Loaded deprecated APIs from release %s", window.RELEASE)
    return _freeze(api)


_UNSET = object()
_deprecated_api: Any = _UNSET
_deprecated_api_lock = threading.Lock()


def deprecated_api() -> Mapping | None:
    """Return the process-wide deprecated API table, building it once."""

    global _deprecated_api
    with _deprecated_api_lock:
        if _deprecated_api is _UNSET:
            _deprecated_api = build_deprecated_api()
        return _deprecated_api


def reset_deprecated_api() -> None:
    global _deprecated_api
    with _deprecated_api_lock:
        _deprecated_api = _UNSET


def install_deprecated(
    namespace: str,
    target: MutableMapping,
    api: Mapping | None | object = _UNSET,
) -> MutableMapping:
    """Merge the deprecated symbols for ``namespace`` into ``target``.

    ``target`` is usually a module's ``globals()``; names it already
    defines are left alone.
    """

    if api is _UNSET:
        api = deprecated_api()
    if not api:
        return target
    subtree = api.get(namespace)
    if not isinstance(subtree, Mapping):
        return target
    before = set(target)
    acyclic_merge(target, subtree)
    added = sorted(str(k) for k in set(target) - before)
    if added:
        logger.debug("Installed deprecated symbols into %s: %s", namespace, ", ".join(added))
    return target


def iter_deprecated(api: Mapping | None, prefix: tuple = ()) -> Iterator[tuple[tuple, Any]]:
    """Yield ``(path, leaf)`` for every symbol in a deprecated API table."""

    if not api:
        return
    for key, value in api.items():
        path = prefix + (key,)
        if isinstance(value, Mapping):
            yield from iter_deprecated(value, path)
        else:
            yield path, value


__all__ = [
    "acyclic_merge",
    "build_deprecated_api",
    "deprecated_api",
    "ensure_tree",
    "install_deprecated",
    "iter_deprecated",
    "reset_deprecated_api",
    "table_graph",
]
