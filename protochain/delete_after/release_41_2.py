"""APIs deprecated in release 41.2.0.

Only :mod:`protochain.maturity` may be imported here; anything else
risks an import cycle with the namespaces these symbols are merged into.
"""
from __future__ import annotations

from ..maturity import deprecated

RELEASE = "41.2.0"
DELETE_AFTER = "2016-03-08"


def _toomanyargmsg(name, expect, actual):
    s = "bad argument #%d to '%s' (no more than %d argument%s expected, got %d)"
    return s % (expect + 1, name, expect, "" if expect == 1 else "s", actual)


def deprecated_api(settings=None):
    """Return ``{namespace: {symbol: wrapped_fn}}`` for this release."""

    def X(old, new, fn):
        return deprecated(
            RELEASE,
            f"'protochain.{old}'",
            f"use 'protochain.{new}' instead",
            fn,
            settings=settings,
        )

    return {
        "debug": {
            "toomanyargmsg": X("debug.toomanyargmsg", "debug.extramsg_toomany", _toomanyargmsg),
        },
    }


__all__ = ["DELETE_AFTER", "RELEASE", "deprecated_api"]
