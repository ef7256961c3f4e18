"""Debug settings, read once from the environment at startup."""
from __future__ import annotations

from dataclasses import dataclass, fields, replace
import os
import threading

from .constants import DEBUG_ENV_VAR, DEBUG_OFF_VALUES, DEBUG_ON_VALUES
from .logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class DebugSettings:
    """Process-wide toggles controlling checks and deprecation support.

    ``deprecate`` is tri-state: ``None`` installs deprecated symbols and
    warns whenever one is called, ``False`` installs them silently and
    ``True`` leaves them out entirely.
    """

    argcheck: bool = True
    deprecate: bool | None = None
    strict: bool = True

    @classmethod
    def disabled(cls) -> "DebugSettings":
        return cls(argcheck=False, deprecate=False, strict=False)

    @classmethod
    def from_string(cls, text: str | None) -> "DebugSettings":
        """Parse a ``PROTOCHAIN_DEBUG`` value."""

        if text is None:
            return cls()
        text = text.strip()
        if not text or text.lower() in DEBUG_ON_VALUES:
            return cls()
        if text.lower() in DEBUG_OFF_VALUES:
            return cls.disabled()

        known = {f.name for f in fields(cls)}
        updates = {}
        for entry in text.split(","):
            entry = entry.strip()
            if not entry:
                continue
            key, sep, raw = entry.partition("=")
            key = key.strip().lower()
            if not sep:
                raise ValueError(f"Invalid debug setting (expected key=value): {entry}")
            if key not in known:
                raise ValueError(f"Unknown debug setting: {key}")
            updates[key] = _parse_flag(key, raw.strip().lower())
        return replace(cls(), **updates)


def _parse_flag(key: str, raw: str) -> bool | None:
    if raw in DEBUG_ON_VALUES:
        return True
    if raw in DEBUG_OFF_VALUES:
        return False
    if key == "deprecate" and raw in ("none", "nil", ""):
        return None
    raise ValueError(f"Invalid value for debug setting {key}: {raw!r}")


_settings: DebugSettings | None = None
_settings_lock = threading.Lock()


def get_settings() -> DebugSettings:
    """Return the process-wide settings, parsing the environment on first use."""

    global _settings
    with _settings_lock:
        if _settings is None:
            _settings = DebugSettings.from_string(os.environ.get(DEBUG_ENV_VAR))
            logger.debug("Loaded debug settings: %s", _settings)
        return _settings


def reset_settings() -> None:
    """Forget cached settings so the next lookup re-reads the environment."""

    global _settings
    with _settings_lock:
        _settings = None


__all__ = [
    "DebugSettings",
    "get_settings",
    "reset_settings",
]
