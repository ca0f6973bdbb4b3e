# src/spicenet_core/netlist/exceptions.py
from dataclasses import dataclass
from pathlib import Path

from ..errors import DiagnosableError, format_diagnostic_report


@dataclass()
class NetlistWriteError(DiagnosableError):
    """Raised when a rendered netlist cannot be written to its destination file."""
    path: Path
    details: str

    def __str__(self):
        return f"Cannot write netlist to '{self.path}': {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Netlist Write Error",
            details=self.details,
            suggestion="Check that the target directory exists and is writable.",
            context={'source_file': self.path}
        )
