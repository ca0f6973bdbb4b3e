# src/spicenet_core/circuit_builder.py

"""
Defines the CircuitBuilder, which turns the parser's Intermediate Representation
(IR) tree into the mutable `Circuit` model used for rendering.

The builder:

1.  **Instantiates elements** through the element registry, so any registered
    element type described in YAML becomes the matching `CircuitElement`.
2.  **Rebuilds the sub-circuit tree**, giving every local sub-circuit its own
    nested `Circuit` with the search paths of the file that defines it.
3.  **Reports failures uniformly.** Any `DiagnosableError` raised while parsing or
    building is re-raised as a single `CircuitBuildError` carrying the report.
"""

import logging
from pathlib import Path
from typing import Union

from .data_structures import Circuit
from .components import ELEMENT_REGISTRY
from .parser import CircuitDescriptionParser
from .parser.raw_data import ParsedCircuitNode, ParsedElementData
from .errors import CircuitBuildError, DiagnosableError


logger = logging.getLogger(__name__)


class CircuitBuilder:
    """Builds `Circuit` trees from parsed description files."""

    def build_circuit(self, parsed_tree_root: ParsedCircuitNode) -> Circuit:
        """
        The build-time entry point. Builds the IR tree into a Circuit.

        Raises:
            CircuitBuildError: If any element or sub-circuit cannot be built.
        """
        logger.info(f"--- Building circuit '{parsed_tree_root.circuit_name}' ---")
        try:
            circuit = self._build_recursive(parsed_tree_root)
        except DiagnosableError as e:
            raise CircuitBuildError(e.get_diagnostic_report()) from e
        logger.info(
            f"--- Circuit '{circuit.name}' built with {len(circuit.elements)} element(s) "
            f"and {len(circuit.subcircuits)} sub-circuit(s). ---"
        )
        return circuit

    def _build_recursive(self, ir_node: ParsedCircuitNode) -> Circuit:
        circuit = Circuit(name=ir_node.circuit_name, search_paths=list(ir_node.search_paths))

        for sub_ir in ir_node.subcircuits:
            logger.debug(f"Building sub-circuit '{sub_ir.name}' from '{sub_ir.definition_file_path}'.")
            circuit.add_subcircuit(sub_ir.name, list(sub_ir.nodes), self._build_recursive(sub_ir.definition_node))

        for element_ir in ir_node.elements:
            circuit.add_element(self._build_element(element_ir))

        return circuit

    @staticmethod
    def _build_element(element_ir: ParsedElementData):
        # The parser schema only admits registered type names.
        ElementClass = ELEMENT_REGISTRY[element_ir.element_type]
        return ElementClass.from_nodes(element_ir.reference, element_ir.nodes, element_ir.value)


def load_circuit(description_path: Union[str, Path]) -> Circuit:
    """
    Parses a circuit description file, with its sub-circuit files, and builds it.

    Raises:
        CircuitBuildError: For any parsing, schema or element error, with the
                           diagnostic report as its message.
    """
    try:
        parsed_tree = CircuitDescriptionParser().parse_to_circuit_tree(description_path)
    except DiagnosableError as e:
        raise CircuitBuildError(e.get_diagnostic_report()) from e
    return CircuitBuilder().build_circuit(parsed_tree)
