# src/spicenet_core/data_structures.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from .components import (
    CircuitElement,
    Resistor,
    Capacitor,
    Diode,
    Transistor,
    SubcircuitInstance,
    VoltageSource,
    UnknownElementError,
)

logger = logging.getLogger(__name__)


@dataclass
class SubcircuitDefinition:
    """
    A locally defined sub-circuit: its ordered external node list and the nested
    Circuit holding its body. The definition owns the nested Circuit exclusively.
    """
    nodes: List[str]
    circuit: Circuit


@dataclass
class Circuit:
    """
    The in-memory netlist model.

    A Circuit is built incrementally by append-only mutation. `elements` keeps
    insertion order, which is the order of the element lines in the rendered
    netlist. `subcircuits` maps a sub-circuit name to its local definition; the
    definitions form a tree. A sub-circuit must not instantiate itself or one of
    its ancestors. This is not checked.

    `search_paths` is only consulted when rendering, to locate the files defining
    transistor models and sub-circuits that are not defined locally.
    """
    name: str
    search_paths: List[str] = field(default_factory=list)
    elements: List[CircuitElement] = field(default_factory=list)
    subcircuits: Dict[str, SubcircuitDefinition] = field(default_factory=dict)

    def add_element(self, element: CircuitElement) -> CircuitElement:
        self.elements.append(element)
        return element

    def add_resistor(self, reference: str, node_a: str, node_b: str, value: str) -> Resistor:
        return self.add_element(Resistor(reference, node_a, node_b, value))

    def add_capacitor(self, reference: str, node_a: str, node_b: str, value: str) -> Capacitor:
        return self.add_element(Capacitor(reference, node_a, node_b, value))

    def add_diode(self, reference: str, node_a: str, node_b: str, model_name: str) -> Diode:
        return self.add_element(Diode(reference, node_a, node_b, model_name))

    def add_transistor(
        self, reference: str, collector: str, base: str, emitter: str, model_name: str
    ) -> Transistor:
        return self.add_element(Transistor(reference, collector, base, emitter, model_name))

    def add_subcircuit_instance(
        self, reference: str, nodes: Sequence[str], subcircuit_name: str
    ) -> SubcircuitInstance:
        return self.add_element(SubcircuitInstance(reference, list(nodes), subcircuit_name))

    def add_voltage_source(self, reference: str, node_pos: str, node_neg: str, value: str) -> VoltageSource:
        return self.add_element(VoltageSource(reference, node_pos, node_neg, value))

    def add_subcircuit(self, name: str, nodes: Sequence[str], circuit: Circuit) -> None:
        """Defines (or silently redefines) a local sub-circuit. The last definition wins."""
        if name in self.subcircuits:
            logger.debug(f"Sub-circuit '{name}' redefined in circuit '{self.name}'.")
        self.subcircuits[name] = SubcircuitDefinition(nodes=list(nodes), circuit=circuit)

    def set_value(self, reference: str, value: str) -> None:
        """
        Patches the value of the first tunable element whose reference equals
        `reference` exactly. Resistors, capacitors and voltage sources get a new
        value; diodes get a new model name. Transistors and sub-circuit instances
        are skipped.

        Raises:
            UnknownElementError: If no tunable element carries the reference.
        """
        for element in self.elements:
            if element.is_tunable and element.reference == reference:
                element.set_value(value)
                logger.debug(f"Set value of '{reference}' in circuit '{self.name}' to '{value}'.")
                return
        raise UnknownElementError(reference=reference, circuit_name=self.name)

    def render(self, close: bool = True) -> List[str]:
        """Renders this circuit to netlist lines. See `NetlistSerializer.render`."""
        from .netlist import NetlistSerializer
        return NetlistSerializer().render(self, close=close)

    def save(self, filename: Optional[Union[str, Path]] = None) -> None:
        """Writes the closed netlist to `filename`, or to stdout if it is None."""
        from .netlist import NetlistSerializer
        NetlistSerializer().save(self, filename)
