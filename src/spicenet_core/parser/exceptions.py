# src/spicenet_core/parser/exceptions.py
"""
Diagnosable exceptions for loading circuit description files.

`ParsingError` covers file-level problems (missing file, unreadable file, broken
YAML, circular sub-circuit files). `SchemaValidationError` covers well-formed YAML
whose structure does not match the description schema. Both derive from
`DiagnosableError`, so `CircuitBuilder` and `load_circuit` can report them through
one `except` clause.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any

from ..errors import DiagnosableError, format_diagnostic_report


class BaseParsingError(DiagnosableError):
    """Common base of all description file errors."""
    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Circuit Description Error",
            details=str(self),
            suggestion="Check the format and content of the circuit description file.",
            context={}
        )


@dataclass()
class ParsingError(BaseParsingError):
    """
    A description file could not be loaded: it does not exist, cannot be read,
    is not valid YAML, has a non-mapping root, or takes part in a circular
    chain of sub-circuit definition files.
    """
    details: str
    file_path: Path

    def __str__(self):
        return f"Parsing error in file '{self.file_path}': {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="YAML Parsing or File Error",
            details=self.details,
            suggestion="Ensure the file exists, is readable, contains valid YAML, and is not included by one of its own sub-circuit files.",
            context={'source_file': self.file_path}
        )


@dataclass()
class SchemaValidationError(BaseParsingError):
    """
    The YAML loaded, but Cerberus rejected its structure (unknown keys, unknown
    element types, duplicate ids, wrong value types, ...).
    """
    errors: Dict[Any, Any]
    file_path: Path

    def _error_lines(self):
        return [f"  - Field '{field}': {message}" for field, message in _flatten_errors(self.errors)]

    def __str__(self):
        return f"Schema validation failed for file '{self.file_path}':\n" + "\n".join(self._error_lines())

    def get_diagnostic_report(self) -> str:
        error_lines = self._error_lines()
        details = (
            "The structure of the YAML file does not conform to the circuit description schema.\n"
            f"See details for {len(error_lines)} issue(s) below:\n\n" + "\n".join(error_lines)
        )
        return format_diagnostic_report(
            error_type="YAML Schema Validation Error",
            details=details,
            suggestion="Correct the listed fields. Every element needs 'type', 'id', 'nodes' and 'value'; ids and sub-circuit names must be unique within a file.",
            context={'source_file': self.file_path}
        )


def _flatten_errors(errors: Any, prefix: str = ""):
    """Flattens Cerberus' nested error tree into (dotted field path, message) pairs."""
    if isinstance(errors, dict):
        for key in sorted(errors, key=str):
            path = f"{prefix}.{key}" if prefix else str(key)
            yield from _flatten_errors(errors[key], path)
    elif isinstance(errors, list):
        for item in errors:
            yield from _flatten_errors(item, prefix)
    else:
        yield prefix, errors
