# src/spicenet_core/__init__.py
import logging
from .log_config import setup_logging

setup_logging()
logger = logging.getLogger(__name__)
logger.debug("SpiceNet Core package initialized.")

from .components import (
    CircuitElement, Resistor, Capacitor, Diode, Transistor, SubcircuitInstance, VoltageSource,
    ELEMENT_REGISTRY, register_element, ElementDefinitionError, UnknownElementError,
)
from .data_structures import Circuit, SubcircuitDefinition
from .library import ModelResolver, ModelNotFoundError, ModelLibraryReadError
from .netlist import NetlistSerializer, NetlistWriteError
from .parser import CircuitDescriptionParser, ParsingError, SchemaValidationError
from .circuit_builder import CircuitBuilder, load_circuit
from .simulation import Simulation, SimulationResult, NgspiceBatchEngine, EngineLog, EngineError
from .errors import SpiceNetError, CircuitBuildError, SimulationRunError, DiagnosableError

__all__ = [
    # Elements
    "CircuitElement", "Resistor", "Capacitor", "Diode", "Transistor",
    "SubcircuitInstance", "VoltageSource", "ELEMENT_REGISTRY", "register_element",
    # Data Structures
    "Circuit", "SubcircuitDefinition",
    # Resolution and Rendering
    "ModelResolver", "NetlistSerializer",
    # Description Files
    "CircuitDescriptionParser", "CircuitBuilder", "load_circuit",
    # Simulation
    "Simulation", "SimulationResult", "NgspiceBatchEngine", "EngineLog",
    # Diagnosable Errors
    "DiagnosableError", "ElementDefinitionError", "UnknownElementError",
    "ModelNotFoundError", "ModelLibraryReadError", "NetlistWriteError",
    "ParsingError", "SchemaValidationError", "EngineError",
    # Top-Level Errors
    "SpiceNetError", "CircuitBuildError", "SimulationRunError",
]
