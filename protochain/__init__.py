"""Prototype-based objects with clone semantics and deprecated API support."""

from . import logging_config as _logging_config
from . import argcheck as _argcheck
from . import config as _config
from . import deprecation as _deprecation
from . import errors as _errors
from . import maturity as _maturity
from . import runtime as _runtime
from . import typetag as _typetag
from .argcheck import *  # noqa: F401,F403
from .config import *  # noqa: F401,F403
from .deprecation import *  # noqa: F401,F403
from .errors import *  # noqa: F401,F403
from .logging_config import *  # noqa: F401,F403
from .maturity import *  # noqa: F401,F403
from .runtime import *  # noqa: F401,F403
from .typetag import *  # noqa: F401,F403

__all__ = []
for _module in (
    _argcheck,
    _config,
    _deprecation,
    _errors,
    _logging_config,
    _maturity,
    _runtime,
    _typetag,
):
    __all__ += getattr(_module, "__all__", [])
__all__ = list(dict.fromkeys(__all__))
