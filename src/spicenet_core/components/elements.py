# src/spicenet_core/components/elements.py
"""
This module provides the concrete circuit elements that can be placed on a netlist:
the two-terminal passives and sources, the diode, the bipolar transistor and the
sub-circuit instance.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .base import CircuitElement, register_element


logger = logging.getLogger(__name__)


@dataclass
class _TwoTerminalElement(CircuitElement):
    """Shared layout of the R, C and V elements: two nodes and a value."""
    node_a: str
    node_b: str
    value: str

    node_count = 2
    value_field = "value"

    def get_nodes(self) -> List[str]:
        return [self.node_a, self.node_b]

    def get_value(self) -> str:
        return self.value

    @classmethod
    def from_nodes(cls, reference: str, nodes: Sequence[str], value: str):
        cls._check_node_count(reference, nodes)
        return cls(reference, nodes[0], nodes[1], value)


@register_element("Resistor")
@dataclass
class Resistor(_TwoTerminalElement):
    spice_prefix = "R"
    conditional_prefix = True


@register_element("Capacitor")
@dataclass
class Capacitor(_TwoTerminalElement):
    spice_prefix = "C"
    conditional_prefix = True


@register_element("VoltageSource")
@dataclass
class VoltageSource(_TwoTerminalElement):
    # Always prefixed: a reference "V1" is written as "VV1".
    spice_prefix = "V"
    conditional_prefix = False

    @property
    def node_pos(self) -> str:
        return self.node_a

    @property
    def node_neg(self) -> str:
        return self.node_b


@register_element("Diode")
@dataclass
class Diode(CircuitElement):
    """A diode instance; `model_name` names a `.model` that may live on the search path."""
    node_a: str
    node_b: str
    model_name: str

    spice_prefix = "D"
    conditional_prefix = True
    node_count = 2
    value_field = "model_name"

    def get_nodes(self) -> List[str]:
        return [self.node_a, self.node_b]

    def get_value(self) -> str:
        return self.model_name

    @classmethod
    def from_nodes(cls, reference: str, nodes: Sequence[str], value: str) -> "Diode":
        cls._check_node_count(reference, nodes)
        return cls(reference, nodes[0], nodes[1], value)


@register_element("Transistor")
@dataclass
class Transistor(CircuitElement):
    """
    A bipolar junction transistor. Its model name is resolved against the search
    path at render time unless a local sub-circuit of that name exists. It is not
    tunable through `Circuit.set_value`.
    """
    collector: str
    base: str
    emitter: str
    model_name: str

    spice_prefix = "Q"
    conditional_prefix = False
    node_count = 3

    def get_nodes(self) -> List[str]:
        return [self.collector, self.base, self.emitter]

    def get_value(self) -> str:
        return self.model_name

    @property
    def external_name(self) -> Optional[str]:
        return self.model_name

    @classmethod
    def from_nodes(cls, reference: str, nodes: Sequence[str], value: str) -> "Transistor":
        cls._check_node_count(reference, nodes)
        return cls(reference, nodes[0], nodes[1], nodes[2], value)


@register_element("SubcircuitInstance")
@dataclass
class SubcircuitInstance(CircuitElement):
    """An `X` line instantiating a local or library sub-circuit with any number of nodes."""
    nodes: List[str]
    subcircuit_name: str

    spice_prefix = "X"
    conditional_prefix = False

    def get_nodes(self) -> List[str]:
        return list(self.nodes)

    def get_value(self) -> str:
        return self.subcircuit_name

    @property
    def external_name(self) -> Optional[str]:
        return self.subcircuit_name

    @classmethod
    def from_nodes(cls, reference: str, nodes: Sequence[str], value: str) -> "SubcircuitInstance":
        return cls(reference, list(nodes), value)
