# src/spicenet_core/netlist/__init__.py
from .serializer import NetlistSerializer, format_element
from .exceptions import NetlistWriteError

__all__ = [
    "NetlistSerializer",
    "format_element",
    "NetlistWriteError",
]
