# src/spicenet_core/simulation/__init__.py
from .exceptions import EngineError, RawFileError
from .engine import EngineLog, VectorInfo, SpiceEngine, EngineFactory
from .rawfile import RawPlot, read_raw_file
from .ngspice import NgspiceBatchEngine, find_ngspice
from .results import SimulationResult
from .execution import Simulation

__all__ = [
    # Exceptions
    "EngineError",
    "RawFileError",
    # Engine contract
    "EngineLog",
    "VectorInfo",
    "SpiceEngine",
    "EngineFactory",
    # ngspice
    "RawPlot",
    "read_raw_file",
    "NgspiceBatchEngine",
    "find_ngspice",
    # Facade
    "SimulationResult",
    "Simulation",
]
