"""Command-line interface for inspecting protochain."""
from __future__ import annotations

import argparse
import sys

from ..config import get_settings
from ..deprecation import deprecated_api, iter_deprecated
from ..logging_config import setup_logging
from ..typetag import type_of
from .container import prototype as Container
from .lineage import export_graphviz, lineage
from .object import prototype as Object

BUILTIN_PROTOTYPES = {
    "Container": Container,
    "Object": Object,
}


def describe_deprecated(api) -> list[str]:
    """Return one report line per deprecated symbol in ``api``."""

    lines = []
    for path, fn in iter_deprecated(api):
        symbol = ".".join(str(part) for part in path)
        notice = getattr(fn, "__deprecation__", None)
        if notice is None:
            lines.append(symbol)
        else:
            lines.append(f"{symbol} [{notice.release}] {notice.extramsg}")
    return lines


def describe_lineage(value) -> str:
    return " -> ".join(type_of(proto) for proto in lineage(value))


def parse_args(args):
    argp = argparse.ArgumentParser(description="protochain prototype object model")

    argp.add_argument(
        "--deprecated",
        action="store_true",
        help="List deprecated symbols still merged into live namespaces",
    )
    argp.add_argument(
        "--lineage",
        choices=sorted(BUILTIN_PROTOTYPES),
        default="Object",
        help="Print the prototype chain of a built-in prototype",
    )
    argp.add_argument(
        "--viz",
        metavar="OUTPUT",
        help="Export the built-in prototype graph with Graphviz (.dot for source)",
    )
    argp.add_argument(
        "--settings", action="store_true", help="Show the active debug settings"
    )
    argp.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Enable protochain logging at this level",
    )

    return argp.parse_args(args)


def main(args):
    params = parse_args(args)

    if params.log_level:
        setup_logging(level=params.log_level, force=True)

    if params.settings:
        settings = get_settings()
        print(f"argcheck:  {settings.argcheck}")
        print(f"deprecate: {settings.deprecate}")
        print(f"strict:    {settings.strict}")
        return 0

    if params.deprecated:
        api = deprecated_api()
        if api is None:
            print("Deprecated API support is disabled.")
            return 0
        lines = describe_deprecated(api)
        if not lines:
            print("No deprecated symbols.")
        for line in lines:
            print(line)
        return 0

    if params.viz:
        path = export_graphviz(BUILTIN_PROTOTYPES.values(), params.viz)
        print(f"  ✓ Lineage graph exported → {path}")
        return 0

    print(describe_lineage(BUILTIN_PROTOTYPES[params.lineage]))
    return 0


__all__ = [
    "describe_deprecated",
    "describe_lineage",
    "main",
    "parse_args",
]


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main(sys.argv[1:]))
