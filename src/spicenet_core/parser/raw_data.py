# src/spicenet_core/parser/raw_data.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

# The classes in this module define the Intermediate Representation (IR) passed
# from the CircuitDescriptionParser to the CircuitBuilder. All values are already
# normalized to strings; nothing here is interpreted.

@dataclass(frozen=True)
class ParsedElementData:
    """IR for one element line of a description file."""
    element_type: str
    reference: str
    nodes: Tuple[str, ...]
    value: str
    source_yaml_path: Path

@dataclass(frozen=True)
class ParsedSubcircuitData:
    """IR for a local sub-circuit definition and the parsed file holding its body."""
    name: str
    nodes: Tuple[str, ...]
    definition_file_path: Path
    definition_node: ParsedCircuitNode
    source_yaml_path: Path

@dataclass(frozen=True)
class ParsedCircuitNode:
    """
    Top-level IR node representing a single parsed YAML file.
    Sub-circuit definitions form a tree of these nodes.
    """
    circuit_name: str
    source_yaml_path: Path
    search_paths: Tuple[str, ...]
    elements: List[ParsedElementData]
    subcircuits: List[ParsedSubcircuitData]
