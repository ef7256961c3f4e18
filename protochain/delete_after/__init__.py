"""Support windows for deprecated APIs, newest first.

Each window keeps the APIs retired in its release importable for at
least a year, or one release cycle if that is longer. Once a window's
``DELETE_AFTER`` date has passed in a new release, drop its module from
``SUPPORT_WINDOWS`` and delete it.
"""

from . import release_41_2

SUPPORT_WINDOWS = (release_41_2,)

__all__ = ["SUPPORT_WINDOWS"]
