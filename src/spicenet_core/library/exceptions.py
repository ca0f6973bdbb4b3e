# src/spicenet_core/library/exceptions.py
"""
Defines the diagnosable exceptions raised while searching model libraries for the
definition of a transistor model or sub-circuit.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

from ..errors import DiagnosableError, format_diagnostic_report


@dataclass()
class ModelNotFoundError(DiagnosableError):
    """
    Raised when no file on any search path defines the requested model or
    sub-circuit. Rendering a netlist that needs the name cannot complete.
    """
    name: str
    search_paths: List[str] = field(default_factory=list)

    def __str__(self):
        return f"No definition for '{self.name}' found in search paths {self.search_paths}."

    def get_diagnostic_report(self) -> str:
        if self.search_paths:
            details = (
                f"None of the files in the search paths contains a '.SUBCKT {self.name}' "
                f"or '.model {self.name}' directive."
            )
        else:
            details = f"The circuit has no search paths, so '{self.name}' could not be looked up."
        return format_diagnostic_report(
            error_type="Model Not Found",
            details=details,
            suggestion=(
                "Add the directory holding the model library to the circuit's search paths, "
                "or define the sub-circuit locally. Names are matched exactly (case-sensitive)."
            ),
            context={'user_input': self.name, 'search_paths': self.search_paths}
        )


@dataclass()
class ModelLibraryReadError(DiagnosableError):
    """
    Raised when a search path directory or one of its files cannot be read while
    resolving a name. The lookup is aborted; no partial result is returned.
    """
    path: Union[str, Path]
    details: str

    def __str__(self):
        return f"Cannot read model library '{self.path}': {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Model Library Read Error",
            details=self.details,
            suggestion="Ensure every search path is an existing directory and that its files are readable UTF-8 text.",
            context={'source_file': self.path}
        )
