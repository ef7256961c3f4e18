"""Shared constant values for the protochain object model."""

PRIVATE_PREFIX = "_"

TYPE_KEY = "_type"
INIT_KEY = "_init"
METHODS_KEY = "_methods"
MAPFIELDS_KEY = "mapfields"

CONTAINER_TYPE = "Container"
OBJECT_TYPE = "Object"

NIL_KIND = "nil"
TABLE_KIND = "table"
FILE_KIND = "file"
CLOSED_FILE_KIND = "closed file"

DEBUG_ENV_VAR = "PROTOCHAIN_DEBUG"

DEBUG_OFF_VALUES = {"0", "false", "off", "no"}
DEBUG_ON_VALUES = {"1", "true", "on", "yes"}

NO_VALUE = "no value"

__all__ = [
    "CLOSED_FILE_KIND",
    "CONTAINER_TYPE",
    "DEBUG_ENV_VAR",
    "DEBUG_OFF_VALUES",
    "DEBUG_ON_VALUES",
    "FILE_KIND",
    "INIT_KEY",
    "MAPFIELDS_KEY",
    "METHODS_KEY",
    "NIL_KIND",
    "NO_VALUE",
    "OBJECT_TYPE",
    "PRIVATE_PREFIX",
    "TABLE_KIND",
    "TYPE_KEY",
]
