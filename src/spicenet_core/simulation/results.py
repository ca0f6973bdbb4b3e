# src/spicenet_core/simulation/results.py
from dataclasses import dataclass
from typing import Dict, List

import numpy as np


@dataclass(frozen=True)
class SimulationResult:
    """
    The outcome of one analysis run by the external engine.

    Attributes:
        analysis: The exact analysis command submitted (e.g. 'ac dec 10 1 1Meg').
        vectors: Result vectors by name. Real vectors are float64 arrays; complex
                 ones (AC analyses) keep both parts as complex128 arrays.
        log: The engine's console output.
        status: The engine's exit status.
        unload: The engine's "unload" flag at exit.
        quit: The engine's "quit" flag at exit.
    """
    analysis: str
    vectors: Dict[str, np.ndarray]
    log: List[str]
    status: int
    unload: bool
    quit: bool

    def __getitem__(self, name: str) -> np.ndarray:
        return self.vectors[name]
