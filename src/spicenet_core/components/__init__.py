# src/spicenet_core/components/__init__.py
import logging
logger = logging.getLogger(__name__)

# Import base first to define registry and decorator
from .base import CircuitElement, ELEMENT_REGISTRY, register_element
from .exceptions import ElementDefinitionError, UnknownElementError
# Import concrete elements to trigger registration
from .elements import (
    Resistor, Capacitor, Diode, Transistor, SubcircuitInstance, VoltageSource
)

logger.debug(f"Available element types: {list(ELEMENT_REGISTRY.keys())}")

__all__ = [
    "CircuitElement",
    "ELEMENT_REGISTRY",
    "register_element",
    "Resistor",
    "Capacitor",
    "Diode",
    "Transistor",
    "SubcircuitInstance",
    "VoltageSource",
    "ElementDefinitionError",
    "UnknownElementError",
]
