# src/spicenet_core/components/exceptions.py
"""
Defines the custom, diagnosable exceptions for the circuit element subsystem.
"""
from dataclasses import dataclass

from ..errors import DiagnosableError, format_diagnostic_report


@dataclass()
class ElementDefinitionError(DiagnosableError):
    """
    Raised when an element cannot be constructed from a node list and value,
    e.g. a two-terminal resistor described with three nodes.
    """
    element_type: str
    reference: str
    details: str

    def __str__(self):
        return f"Invalid {self.element_type} '{self.reference}': {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type=f"Invalid {self.element_type} Definition",
            details=self.details,
            suggestion="Check the number of nodes given for this element type.",
            context={'reference': self.reference}
        )


@dataclass()
class UnknownElementError(DiagnosableError, KeyError):
    """
    Raised by `Circuit.set_value` when no tunable element (resistor, capacitor,
    diode or voltage source) carries the requested reference.

    It is also a `KeyError`, since the failure is a failed lookup by reference.
    """
    reference: str
    circuit_name: str = ""

    def __str__(self):
        return f"No tunable circuit element with reference '{self.reference}'."

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Unknown Circuit Element",
            details=(
                f"No resistor, capacitor, diode or voltage source with reference "
                f"'{self.reference}' exists in this circuit."
            ),
            suggestion=(
                "References are compared exactly as they were added (e.g. '1' and 'R1' differ). "
                "Transistors and sub-circuit instances cannot be patched by reference."
            ),
            context={'circuit': self.circuit_name, 'reference': self.reference}
        )
