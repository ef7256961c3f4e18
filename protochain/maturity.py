"""Deprecation notices for retired protochain APIs."""
from __future__ import annotations

from dataclasses import dataclass
import functools
from typing import Any, Callable
import warnings

from .config import DebugSettings, get_settings
from .logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_EXTRAMSG = "and will be removed entirely in a future release"


@dataclass(frozen=True)
class DeprecationNotice:
    """Which symbol was retired, in which release, and what to use instead."""

    release: str
    name: str
    extramsg: str = DEFAULT_EXTRAMSG

    def message(self) -> str:
        return f"{self.name} was deprecated in release {self.release}, {self.extramsg}."


class ProtochainDeprecationWarning(DeprecationWarning):
    """Warning category emitted when a deprecated symbol is called.

    This is a ``DeprecationWarning``, so Python's default filters only
    show it for calls made from ``__main__``. Library callers see it
    under ``python -W default``, ``PYTHONWARNINGS=default`` or pytest.
    """

    def __init__(self, notice: DeprecationNotice) -> None:
        super().__init__(notice.message())
        self.notice = notice

    @property
    def release(self) -> str:
        return self.notice.release


def deprecation_message(
    release: str,
    name: str,
    extramsg: str | None = None,
    settings: DebugSettings | None = None,
) -> str:
    """Return the notice text, or an empty string when warnings are silenced."""

    settings = settings or get_settings()
    if settings.deprecate is not None:
        return ""
    return DeprecationNotice(release, name, extramsg or DEFAULT_EXTRAMSG).message()


def deprecated(
    release: str,
    name: str,
    extramsg: str | None,
    fn: Callable[..., Any],
    settings: DebugSettings | None = None,
) -> Callable[..., Any] | None:
    """Wrap ``fn`` so each call reports that ``name`` was retired in ``release``.

    Returns ``None`` when deprecated APIs are disabled, so callers never
    install the symbol at all.
    """

    settings = settings or get_settings()
    if settings.deprecate:
        return None

    notice = DeprecationNotice(release, name, extramsg or DEFAULT_EXTRAMSG)
    silent = settings.deprecate is False

    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        if not silent:
            logger.debug("Deprecated call: %s", notice.name)
            warnings.warn(ProtochainDeprecationWarning(notice), stacklevel=2)
        return fn(*args, **kwargs)

    wrapper.__deprecation__ = notice
    return wrapper


__all__ = [
    "DEFAULT_EXTRAMSG",
    "DeprecationNotice",
    "ProtochainDeprecationWarning",
    "deprecated",
    "deprecation_message",
]
