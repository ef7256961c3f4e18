"""
Prototype object model.

      Container
       `-> Object
            `-> any prototype cloned from it

Calling a prototype clones it: the clone copies the public fields,
merges the call's arguments over them, and inherits type tag, methods
and merge behavior unless the arguments override them.
"""

from . import container as _container
from . import lineage as _lineage
from .cli import main, parse_args
from .container import (
    Prototype,
    clone,
    is_private_key,
    is_table_like,
    iterate_public,
    mapfields,
    merge_override,
)
from .container import prototype as Container
from .lineage import export_graphviz, is_linear, lineage, lineage_graph, to_pydot
from .object import prototype as Object

__all__ = []
for module in (_container, _lineage):
    __all__.extend(getattr(module, "__all__", []))
__all__ += ["Container", "Object", "main", "parse_args"]
__all__ = [name for name in dict.fromkeys(__all__) if name != "prototype"]
