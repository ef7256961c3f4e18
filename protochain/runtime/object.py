"""Object prototype.

A specialization of the Container prototype whose clones share a table
of methods. Methods are looked up after public fields, so a field with
the same name hides the method for that instance.

Prototype chain::

    Container
     `-> Object

Example::

    Process = Object(_type="Process", _init=("status", "out", "err"))
    process = Process(0, "ok\\n", "", command="ls")
    process.command         # 'ls'
    process.clone(status=1) # Process {status=1, out='ok\\n', err='', command='ls'}
"""
from __future__ import annotations

from ..argcheck import argscheck
from ..constants import METHODS_KEY, OBJECT_TYPE, TYPE_KEY
from ..typetag import type_of
from .container import clone, mapfields
from .container import prototype as Container


def X(decl, fn):
    return argscheck("protochain.object." + decl, fn)


methods = {
    # Usable where ``__call__`` of a prototype is shadowed or unavailable.
    "clone": clone,
    # Replace this with a field or method of the same name to customize
    # how clones merge their arguments; it must return (public, private).
    "mapfields": X("mapfields (table|object, table|object, ?table)", mapfields),
}


prototype = Container({TYPE_KEY: OBJECT_TYPE, METHODS_KEY: methods})


__all__ = [
    "methods",
    "prototype",
    "type_of",
]
