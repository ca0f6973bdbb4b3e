# src/spicenet_core/parser/__init__.py
from .raw_data import (
    ParsedCircuitNode,
    ParsedElementData,
    ParsedSubcircuitData,
)
from .parser import CircuitDescriptionParser
from .exceptions import ParsingError, SchemaValidationError

__all__ = [
    # IR Data Structures
    "ParsedCircuitNode",
    "ParsedElementData",
    "ParsedSubcircuitData",
    # Parser and Exceptions
    "CircuitDescriptionParser",
    "ParsingError",
    "SchemaValidationError",
]
