"""Shared fixtures for the protochain test suite."""

import pytest

from protochain import Object


@pytest.fixture
def Node():
    return Object(_type="Node")


@pytest.fixture
def Point():
    return Object(_type="Point", _init=("x", "y"))
