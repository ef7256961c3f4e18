"""Tests for the field merge performed while cloning."""

import pytest

from protochain import Container, InvalidArgument, mapfields


def test_rename_map_moves_values_to_new_keys():
    public, private = mapfields(Container(), {"old": 5}, {"old": "new"})

    assert public == {"new": 5}
    assert "old" not in public
    assert private == {}


def test_unmapped_keys_pass_through():
    public, _ = mapfields(Container(), {"old": 5, "kept": 1}, {"old": "new"})

    assert public == {"new": 5, "kept": 1}


def test_rename_can_route_a_key_to_private_storage():
    public, private = mapfields(Container(), {"secret": 1}, {"secret": "_secret"})

    assert public == {}
    assert private == {"_secret": 1}


def test_every_source_key_lands_in_exactly_one_partition():
    src = {"a": 1, "_b": 2, "c": 3, "_d": 4}
    public, private = mapfields(Container(), src)

    assert set(public) & set(private) == set()
    assert set(public) | set(private) == set(src)


def test_later_merges_win_on_colliding_keys():
    skeleton = Container(x=0, a=0)
    first = {"a": 1, "b": 1}
    second = {"a": 2, "c": 3}

    step, _ = mapfields(skeleton, first)
    sequential, _ = mapfields(Container(step), second)
    combined, _ = mapfields(skeleton, {**first, **second})

    assert sequential == combined == {"x": 0, "a": 2, "b": 1, "c": 3}


def test_merge_does_not_touch_the_skeleton():
    skeleton = Container(a=1)
    public, _ = mapfields(skeleton, {"a": 2})

    public["extra"] = True
    assert dict(skeleton) == {"a": 1}


def test_prototype_source_is_read_through_public_fields():
    source = Container({"_hidden": 1, "shown": 2})
    public, private = mapfields(Container(), source)

    assert public == {"shown": 2}
    assert private == {}


@pytest.mark.parametrize("src", [5, "text", None, 2.5])
def test_scalar_sources_are_rejected(src):
    with pytest.raises(InvalidArgument, match="cannot merge fields"):
        mapfields(Container(), src)
