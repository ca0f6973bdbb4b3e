# tests/test_parser/test_description_parser.py
import pytest
from pathlib import Path

from spicenet_core.parser import (
    CircuitDescriptionParser,
    ParsingError,
    SchemaValidationError,
    ParsedCircuitNode,
)

# --- Fixtures for YAML Content ---

@pytest.fixture
def amplifier_yaml():
    """A flat description using every element type."""
    return """
circuit_name: amplifier
search_paths:
  - spice
elements:
  - type: VoltageSource
    id: 1
    nodes: [vcc, 0]
    value: 5
  - type: Resistor
    id: R1
    nodes: [vcc, base]
    value: 100k
  - type: Transistor
    id: 1
    nodes: [out, base, 0]
    value: BC547B
  - type: Diode
    id: 1
    nodes: [out, clamp]
    value: 1N4148
  - type: Capacitor
    id: 2
    nodes: [out, 0]
    value: 1.5e-9
  - type: SubcircuitInstance
    id: 1
    nodes: [out, inv, vcc, 0, buf]
    value: TL072
"""


@pytest.fixture
def divider_yaml():
    return """
elements:
  - type: Resistor
    id: 1
    nodes: [in, out]
    value: 10k
  - type: Resistor
    id: 2
    nodes: [out, "0"]
    value: 10k
"""


def write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


class TestDescriptionParser:

    def test_parse_flat_description(self, tmp_path, amplifier_yaml):
        source = write(tmp_path / "amp.yaml", amplifier_yaml)

        tree = CircuitDescriptionParser().parse_to_circuit_tree(source)

        assert isinstance(tree, ParsedCircuitNode)
        assert tree.circuit_name == "amplifier"
        assert tree.source_yaml_path == source.resolve()
        assert tree.search_paths == (str(source.resolve().parent / "spice"),)
        assert tree.subcircuits == []
        assert [(e.element_type, e.reference) for e in tree.elements] == [
            ("VoltageSource", "1"),
            ("Resistor", "R1"),
            ("Transistor", "1"),
            ("Diode", "1"),
            ("Capacitor", "2"),
            ("SubcircuitInstance", "1"),
        ]

    def test_scalars_are_normalized_to_strings(self, tmp_path, amplifier_yaml):
        tree = CircuitDescriptionParser().parse_to_circuit_tree(write(tmp_path / "amp.yaml", amplifier_yaml))

        source = tree.elements[0]
        assert source.nodes == ("vcc", "0")
        assert source.value == "5"
        assert tree.elements[4].value == "1.5e-09"

    def test_circuit_name_defaults_to_file_stem(self, tmp_path, divider_yaml):
        tree = CircuitDescriptionParser().parse_to_circuit_tree(write(tmp_path / "divider.yaml", divider_yaml))
        assert tree.circuit_name == "divider"
        assert tree.search_paths == ()

    def test_hierarchical_description(self, tmp_path, divider_yaml):
        write(tmp_path / "blocks" / "divider.yaml", divider_yaml)
        top = write(tmp_path / "top.yaml", """
circuit_name: top
subcircuits:
  - name: DIV
    nodes: [in, out]
    definition_file: blocks/divider.yaml
elements:
  - type: SubcircuitInstance
    id: 1
    nodes: [a, b]
    value: DIV
""")

        tree = CircuitDescriptionParser().parse_to_circuit_tree(top)

        assert len(tree.subcircuits) == 1
        sub = tree.subcircuits[0]
        assert sub.name == "DIV"
        assert sub.nodes == ("in", "out")
        assert sub.definition_file_path == (tmp_path / "blocks" / "divider.yaml").resolve()
        assert sub.source_yaml_path == top.resolve()
        assert sub.definition_node.circuit_name == "divider"
        assert len(sub.definition_node.elements) == 2

    def test_same_definition_file_may_be_used_twice(self, tmp_path, divider_yaml):
        """Reusing a file in sibling branches is not a cycle."""
        write(tmp_path / "divider.yaml", divider_yaml)
        top = write(tmp_path / "top.yaml", """
subcircuits:
  - {name: DIVA, nodes: [i, o], definition_file: divider.yaml}
  - {name: DIVB, nodes: [i, o], definition_file: divider.yaml}
elements: []
""")

        tree = CircuitDescriptionParser().parse_to_circuit_tree(top)

        assert [s.name for s in tree.subcircuits] == ["DIVA", "DIVB"]

    def test_circular_definition_files_raise(self, tmp_path):
        write(tmp_path / "a.yaml", """
subcircuits:
  - {name: B, nodes: [x], definition_file: b.yaml}
elements: []
""")
        write(tmp_path / "b.yaml", """
subcircuits:
  - {name: A, nodes: [x], definition_file: a.yaml}
elements: []
""")

        with pytest.raises(ParsingError, match="Circular sub-circuit dependency"):
            CircuitDescriptionParser().parse_to_circuit_tree(tmp_path / "a.yaml")


class TestDescriptionParserErrors:

    def test_missing_file(self, tmp_path):
        with pytest.raises(ParsingError) as excinfo:
            CircuitDescriptionParser().parse_to_circuit_tree(tmp_path / "nope.yaml")
        assert "Description file not found" in excinfo.value.details
        assert "YAML Parsing or File Error" in excinfo.value.get_diagnostic_report()

    def test_invalid_yaml_syntax(self, tmp_path):
        source = write(tmp_path / "broken.yaml", "elements: [unclosed\n")
        with pytest.raises(ParsingError, match="Invalid YAML syntax"):
            CircuitDescriptionParser().parse_to_circuit_tree(source)

    def test_empty_file(self, tmp_path):
        source = write(tmp_path / "empty.yaml", "")
        with pytest.raises(ParsingError, match="empty"):
            CircuitDescriptionParser().parse_to_circuit_tree(source)

    def test_non_mapping_root(self, tmp_path):
        source = write(tmp_path / "list.yaml", "- a\n- b\n")
        with pytest.raises(ParsingError, match="must be a dictionary"):
            CircuitDescriptionParser().parse_to_circuit_tree(source)

    def test_missing_definition_file(self, tmp_path):
        source = write(tmp_path / "top.yaml", """
subcircuits:
  - {name: GONE, nodes: [x], definition_file: gone.yaml}
elements: []
""")
        with pytest.raises(ParsingError, match="Description file not found"):
            CircuitDescriptionParser().parse_to_circuit_tree(source)

    def test_unknown_element_type(self, tmp_path):
        source = write(tmp_path / "bad.yaml", """
elements:
  - {type: Inductor, id: 1, nodes: [a, b], value: 1u}
""")
        with pytest.raises(SchemaValidationError) as excinfo:
            CircuitDescriptionParser().parse_to_circuit_tree(source)
        assert "elements.0.type" in str(excinfo.value)
        assert "unallowed value Inductor" in str(excinfo.value)

    def test_duplicate_type_and_id(self, tmp_path):
        source = write(tmp_path / "dupes.yaml", """
elements:
  - {type: Resistor, id: 1, nodes: [a, b], value: 1k}
  - {type: Capacitor, id: 1, nodes: [a, b], value: 1n}
  - {type: Resistor, id: 1, nodes: [b, c], value: 2k}
""")
        with pytest.raises(SchemaValidationError) as excinfo:
            CircuitDescriptionParser().parse_to_circuit_tree(source)
        assert "Duplicate values found for type/id: ['Resistor/1']" in excinfo.value.get_diagnostic_report()

    def test_value_with_blanks_is_rejected(self, tmp_path):
        source = write(tmp_path / "blanks.yaml", """
elements:
  - {type: VoltageSource, id: 1, nodes: [a, "0"], value: "DC 5"}
""")
        with pytest.raises(SchemaValidationError, match="single non-empty token"):
            CircuitDescriptionParser().parse_to_circuit_tree(source)

    def test_missing_required_and_unknown_keys(self, tmp_path):
        source = write(tmp_path / "keys.yaml", """
ground: gnd
elements:
  - {type: Resistor, id: 1, nodes: [a, b]}
""")
        with pytest.raises(SchemaValidationError) as excinfo:
            CircuitDescriptionParser().parse_to_circuit_tree(source)

        message = str(excinfo.value)
        assert "Field 'ground': unknown field" in message
        assert "Field 'elements.0.value': required field" in message
