# src/spicenet_core/simulation/engine.py
"""
The contract between `Simulation` and an external SPICE engine.

An engine is driven in four steps: load the netlist lines as the circuit, run one
analysis command, ask for the current plot, then read the plot's vectors by name.
While it runs it reports its console output and, at the end, an exit status
triple through an `EngineLog`.
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Protocol

import numpy as np

logger = logging.getLogger(__name__)


@dataclass
class EngineLog:
    """Collects an engine's console output and its exit status."""
    lines: List[str] = field(default_factory=list)
    status: int = 0
    unload: bool = False
    quit: bool = False

    def send_char(self, text: str) -> None:
        logger.debug(f"[engine] {text}")
        self.lines.append(text)

    def controlled_exit(self, status: int, unload: bool, quit: bool) -> None:
        self.status = status
        self.unload = unload
        self.quit = quit


@dataclass(frozen=True)
class VectorInfo:
    """One named result vector. `data` is float64 for real vectors, complex128 otherwise."""
    name: str
    data: np.ndarray

    @property
    def is_complex(self) -> bool:
        return np.iscomplexobj(self.data)


class SpiceEngine(Protocol):
    def circuit(self, lines: List[str]) -> None:
        """Loads the netlist lines as the circuit to simulate."""
        ...

    def command(self, command: str) -> None:
        """Runs one analysis command (e.g. 'tran 1u 1m 0') on the loaded circuit."""
        ...

    def current_plot(self) -> str:
        """The name of the plot produced by the last command."""
        ...

    def all_vectors(self, plot: str) -> List[str]:
        """The names of all vectors in `plot`."""
        ...

    def vector_info(self, name: str) -> VectorInfo:
        """The data of one vector of the current plot."""
        ...


EngineFactory = Callable[[EngineLog], SpiceEngine]
