# src/spicenet_core/errors.py
"""
Error hierarchy shared by every subsystem.

Low-level failures (a model missing from the library, a malformed description
file, an engine that exited with a failure status) are `DiagnosableError`s that
know how to describe themselves. The two entry points users call, loading a
circuit and running a simulation, catch those and raise a `SpiceNetError`
whose message is the finished report.
"""
import logging
from typing import Any, Dict, Protocol, abstractmethod
from typing import runtime_checkable

logger = logging.getLogger(__name__)


class SpiceNetError(Exception):
    """Base class for the errors raised by the user-facing entry points."""
    pass


class CircuitBuildError(SpiceNetError):
    """
    `load_circuit` or `CircuitBuilder` could not turn a description file into a
    Circuit: the file is missing or malformed, violates the schema, or
    describes an element with the wrong number of nodes.
    """
    pass


class SimulationRunError(SpiceNetError):
    """
    `Simulation` could not produce result vectors: the netlist did not render
    (e.g. an unresolved transistor model) or the engine reported a failure.
    """
    pass


@runtime_checkable
class Diagnosable(Protocol):
    def get_diagnostic_report(self) -> str:
        """Returns a multi-line report naming the problem, where it happened and what to do."""
        ...


class DiagnosableError(Exception, Diagnosable):
    """
    Base of all internal errors. Subclasses are dataclasses holding the facts
    of the failure and must implement `get_diagnostic_report`, normally through
    `format_diagnostic_report`.
    """
    @abstractmethod
    def get_diagnostic_report(self) -> str:
        raise NotImplementedError


# Context keys understood by format_diagnostic_report, in display order.
_CONTEXT_LABELS = (
    ('circuit', "Circuit"),
    ('reference', "Element"),
    ('source_file', "File"),
    ('search_paths', "Search Paths"),
    ('user_input', "Requested"),
    ('status', "Exit Status"),
)


def _format_context_value(key: str, value: Any) -> str:
    if key == 'search_paths':
        return ", ".join(str(p) for p in value)
    if key == 'user_input':
        return f"'{value}'"
    return str(value)


def format_diagnostic_report(
    error_type: str,
    details: str,
    suggestion: str,
    context: Dict[str, Any]
) -> str:
    """
    Builds the report block shown for every netlist, library, description-file
    and engine error.

    Args:
        error_type: Short title, e.g. "Model Not Found".
        details: What went wrong. May span several lines.
        suggestion: What to change. Omitted from the report when empty.
        context: Optional facts keyed by the names in `_CONTEXT_LABELS`. Empty
                 values are left out, so an exit status of 0 is not shown.
    """
    lines = [
        "\n",
        "==================== SpiceNet Core: Netlist Diagnostic ====================",
        f"Error Type:     {error_type}",
    ]
    for key, label in _CONTEXT_LABELS:
        value = context.get(key)
        if value:
            lines.append(f"{label + ':':<16}{_format_context_value(key, value)}")

    lines.append("\nDetails:")
    lines.extend(f"  {line}" for line in details.splitlines())

    if suggestion:
        lines.append("\nSuggestion:")
        lines.extend(f"  {line}" for line in suggestion.splitlines())

    lines.append("=" * 75)
    return "\n".join(lines)
