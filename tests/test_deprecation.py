"""Tests for merging deprecated APIs back into live namespaces."""

import copy
import warnings

import pytest

from protochain import (
    DebugSettings,
    ProtochainDeprecationWarning,
    acyclic_merge,
    build_deprecated_api,
    debug,
    deprecated_api,
    ensure_tree,
    install_deprecated,
    iter_deprecated,
    reset_deprecated_api,
    table_graph,
)


def test_acyclic_merge_adds_missing_leaves_only():
    dest = {"x": {"y": 1}}

    result = acyclic_merge(dest, {"x": {"y": 2, "z": 3}})

    assert result is dest
    assert dest == {"x": {"y": 1, "z": 3}}


def test_acyclic_merge_never_overwrites_existing_leaves():
    dest = {"a": 1, "b": {"c": 2}, "f": None}
    src = {"a": {"x": 1}, "b": {"c": 3, "d": 4}, "f": 5, "g": 6}

    acyclic_merge(dest, src)

    assert dest == {"a": 1, "b": {"c": 2, "d": 4}, "f": None, "g": 6}


def test_acyclic_merge_is_idempotent():
    dest = {"keep": 1, "ns": {"old": "live"}}
    src = {"keep": 2, "ns": {"old": "dead", "gone": "dead"}, "extra": {"deep": {"leaf": 1}}}

    once = acyclic_merge(copy.deepcopy(dest), src)
    twice = acyclic_merge(acyclic_merge(copy.deepcopy(dest), src), src)

    assert once == twice


def test_acyclic_merge_builds_fresh_subtables():
    src = {"ns": {"leaf": 1}}
    dest = acyclic_merge({}, src)

    assert dest == src
    assert dest["ns"] is not src["ns"]


def test_ensure_tree_accepts_nested_tables():
    table = {"a": {"b": {"c": 1}}, "d": {}}

    assert ensure_tree(table) is table
    assert table_graph(table).number_of_nodes() == 4


def test_ensure_tree_rejects_shared_and_cyclic_tables():
    shared = {"leaf": 1}
    with pytest.raises(ValueError, match="tree"):
        ensure_tree({"a": shared, "b": shared})

    cyclic = {"a": {}}
    cyclic["a"]["back"] = cyclic
    with pytest.raises(ValueError, match="tree"):
        ensure_tree(cyclic)


def test_build_deprecated_api_is_absent_when_disabled():
    assert build_deprecated_api(DebugSettings(deprecate=True)) is None


def test_build_deprecated_api_is_read_only():
    api = build_deprecated_api(DebugSettings())

    assert callable(api["debug"]["toomanyargmsg"])
    with pytest.raises(TypeError):
        api["debug"]["toomanyargmsg"] = None


def test_deprecated_symbol_warns_with_its_release():
    api = build_deprecated_api(DebugSettings())
    fn = api["debug"]["toomanyargmsg"]

    with pytest.warns(ProtochainDeprecationWarning) as record:
        result = fn("f", 2, 3)

    assert result == "bad argument #3 to 'f' (no more than 2 arguments expected, got 3)"
    assert record[0].message.release == "41.2.0"
    assert "protochain.debug.extramsg_toomany" in str(record[0].message)


def test_deprecated_symbol_can_be_silenced():
    api = build_deprecated_api(DebugSettings(deprecate=False))
    fn = api["debug"]["toomanyargmsg"]

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert fn("f", 1, 2) == "bad argument #2 to 'f' (no more than 1 argument expected, got 2)"


def test_install_deprecated_keeps_existing_names():
    api = build_deprecated_api(DebugSettings())
    sentinel = object()

    target = {"existing": 1}
    install_deprecated("debug", target, api)
    assert callable(target["toomanyargmsg"])
    assert target["existing"] == 1

    live = {"toomanyargmsg": sentinel}
    install_deprecated("debug", live, api)
    assert live["toomanyargmsg"] is sentinel


def test_install_deprecated_without_support_leaves_symbol_missing():
    target = {}
    install_deprecated("debug", target, None)

    with pytest.raises(KeyError):
        target["toomanyargmsg"]


def test_install_deprecated_ignores_unknown_namespaces():
    target = {}
    install_deprecated("nowhere", target, build_deprecated_api(DebugSettings()))

    assert target == {}


def test_debug_namespace_carries_the_deprecated_helper():
    assert "toomanyargmsg" not in debug.__all__

    with pytest.warns(DeprecationWarning, match="41.2.0"):
        message = debug.toomanyargmsg("f", 1, 2)
    assert message == "bad argument #2 to 'f' (no more than 1 argument expected, got 2)"


def test_deprecated_api_is_built_once():
    first = deprecated_api()
    assert deprecated_api() is first

    reset_deprecated_api()
    rebuilt = deprecated_api()
    assert rebuilt is not first
    assert set(rebuilt) == set(first)


def test_iter_deprecated_walks_leaves():
    api = build_deprecated_api(DebugSettings())
    paths = [path for path, _ in iter_deprecated(api)]

    assert paths == [("debug", "toomanyargmsg")]
    assert list(iter_deprecated(None)) == []
