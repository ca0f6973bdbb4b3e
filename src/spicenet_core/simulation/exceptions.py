# src/spicenet_core/simulation/exceptions.py
"""
Diagnosable exceptions for the hand-off to the external SPICE engine.

Both derive from `DiagnosableError`; `Simulation` catches them and re-raises a
single `SimulationRunError` carrying the report.
"""
from dataclasses import dataclass
from typing import Optional

from ..errors import DiagnosableError, format_diagnostic_report


@dataclass()
class EngineError(DiagnosableError):
    """
    The engine could not be started, did not finish in time, exited with a
    failure status, or produced no result vectors.
    """
    details: str
    status: Optional[int] = None

    def __str__(self):
        status_str = f" (exit status {self.status})" if self.status is not None else ""
        return f"Simulation engine failure{status_str}: {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Simulation Engine Error",
            details=self.details,
            suggestion=(
                "Check that ngspice is installed and on PATH, that every included model file exists, "
                "and review the engine log kept on Simulation.buffer."
            ),
            context={'status': self.status}
        )


@dataclass()
class RawFileError(DiagnosableError):
    """An engine output file does not follow the ASCII rawfile layout."""
    details: str

    def __str__(self):
        return f"Malformed rawfile: {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Malformed Simulation Output",
            details=self.details,
            suggestion="The engine must write results with 'set filetype=ascii'.",
            context={}
        )
