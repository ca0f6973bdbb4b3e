# src/spicenet_core/library/__init__.py
from .resolver import (
    ModelResolver,
    SUBCKT_REGEX,
    MODEL_REGEX,
    INCLUDE_REGEX,
    find_directive_names,
    find_first_include,
)
from .exceptions import ModelNotFoundError, ModelLibraryReadError

__all__ = [
    "ModelResolver",
    "SUBCKT_REGEX",
    "MODEL_REGEX",
    "INCLUDE_REGEX",
    "find_directive_names",
    "find_first_include",
    "ModelNotFoundError",
    "ModelLibraryReadError",
]
