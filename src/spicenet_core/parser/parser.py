# src/spicenet_core/parser/parser.py
import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Set, Union

import cerberus
import yaml

from ..components import ELEMENT_REGISTRY
from .raw_data import (
    ParsedCircuitNode,
    ParsedElementData,
    ParsedSubcircuitData,
)
from .exceptions import ParsingError, SchemaValidationError

logger = logging.getLogger(__name__)

# A netlist token: anything without blanks, since blanks separate fields on a netlist line.
SPICE_TOKEN_REGEX = re.compile(r"^\S+$")


class DescriptionValidator(cerberus.Validator):
    """Cerberus validator with the extra rules needed by circuit description files."""

    def _validate_spice_token(self, constraint, field, value):
        """
        Requires the value, as written on a netlist line, to be a single token.

        The rule's arguments are validated against this schema:
        {'type': 'boolean'}
        """
        if constraint and not SPICE_TOKEN_REGEX.match(str(value)):
            self._error(field, f"'{value}' must be a single non-empty token without blanks.")

    def _validate_unique_by_keys(self, keys, field, value):
        """
        Requires the combination of the given keys to be unique across a list of mappings.

        The rule's arguments are validated against this schema:
        {'type': 'list', 'schema': {'type': 'string'}}
        """
        if not isinstance(value, list):
            return

        seen = set()
        duplicates = []
        for item in value:
            if not isinstance(item, dict):
                continue
            item_key = tuple(str(item.get(k)) for k in keys)
            if item_key in seen:
                duplicates.append(item_key)
            else:
                seen.add(item_key)

        if duplicates:
            shown = sorted({"/".join(d) for d in duplicates})
            self._error(field, f"Duplicate values found for {'/'.join(keys)}: {shown}")


class CircuitDescriptionParser:
    """
    Recursively parses and validates a hierarchy of circuit description YAML files.
    Its sole responsibility is to produce a tree of Intermediate Representation (IR)
    objects; `CircuitBuilder` turns that tree into `Circuit` objects.
    """
    _token_rule = {"type": ["string", "integer"], "empty": False, "spice_token": True}
    _value_rule = {"type": ["string", "number"], "required": True, "empty": False, "spice_token": True}

    _subcircuit_schema = {
        "name": {"type": "string", "required": True, "empty": False, "spice_token": True},
        "nodes": {"type": "list", "required": True, "schema": _token_rule},
        "definition_file": {"type": "string", "required": True, "empty": False},
    }

    def __init__(self):
        element_schema = {
            "type": {"type": "string", "required": True, "allowed": sorted(ELEMENT_REGISTRY)},
            "id": {**self._token_rule, "required": True},
            "nodes": {"type": "list", "required": True, "schema": self._token_rule},
            "value": self._value_rule,
        }
        self._schema = {
            "circuit_name": {"type": "string", "required": False, "empty": False, "spice_token": True},
            "search_paths": {"type": "list", "required": False, "schema": {"type": "string", "empty": False}},
            "elements": {
                "type": "list", "required": True, "unique_by_keys": ["type", "id"],
                "schema": {"type": "dict", "schema": element_schema},
            },
            "subcircuits": {
                "type": "list", "required": False, "unique_by_keys": ["name"],
                "schema": {"type": "dict", "schema": self._subcircuit_schema},
            },
        }
        self._validator = DescriptionValidator(self._schema)
        self._validator.allow_unknown = False
        logger.debug("CircuitDescriptionParser initialized for element types %s.", sorted(ELEMENT_REGISTRY))

    def parse_to_circuit_tree(self, top_level_yaml_path: Union[str, Path]) -> ParsedCircuitNode:
        """Parses the top-level YAML and all sub-circuit files, returning the complete IR tree."""
        top_path = Path(top_level_yaml_path).resolve()
        logger.info(f"Starting hierarchical parsing from top-level file: {top_path}")
        return self._parse_recursive(top_path, visited_paths=set())

    def _parse_recursive(self, yaml_path: Path, visited_paths: Set[Path]) -> ParsedCircuitNode:
        """Parses one file and, depth-first, the sub-circuit files it names."""
        resolved_path = yaml_path.resolve()
        if resolved_path in visited_paths:
            raise ParsingError(
                details=f"Circular sub-circuit dependency detected involving: {resolved_path}",
                file_path=resolved_path
            )

        visited_paths.add(resolved_path)
        logger.debug(f"Parsing description file: {resolved_path}")

        yaml_content = self._load_yaml(resolved_path)
        if not self._validator.validate(yaml_content):
            raise SchemaValidationError(self._validator.errors, resolved_path)

        validated_data = self._validator.document
        base_dir = resolved_path.parent

        parsed_elements: List[ParsedElementData] = [
            ParsedElementData(
                element_type=raw["type"],
                reference=str(raw["id"]),
                nodes=tuple(str(n) for n in raw["nodes"]),
                value=str(raw["value"]),
                source_yaml_path=resolved_path,
            )
            for raw in validated_data["elements"]
        ]

        parsed_subcircuits: List[ParsedSubcircuitData] = []
        for raw in validated_data.get("subcircuits", []):
            definition_path = (base_dir / raw["definition_file"]).resolve()
            parsed_subcircuits.append(
                ParsedSubcircuitData(
                    name=raw["name"],
                    nodes=tuple(str(n) for n in raw["nodes"]),
                    definition_file_path=definition_path,
                    definition_node=self._parse_recursive(definition_path, visited_paths.copy()),
                    source_yaml_path=resolved_path,
                )
            )

        return ParsedCircuitNode(
            circuit_name=validated_data.get("circuit_name", resolved_path.stem),
            source_yaml_path=resolved_path,
            search_paths=tuple(str(base_dir / p) for p in validated_data.get("search_paths", [])),
            elements=parsed_elements,
            subcircuits=parsed_subcircuits,
        )

    def _load_yaml(self, source: Path) -> Dict[str, Any]:
        """Loads and performs basic sanity checks on a YAML file."""
        if not source.is_file():
            raise ParsingError(details=f"Description file not found at path: {source}", file_path=source)
        try:
            with source.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except PermissionError as e:
            raise ParsingError(details=f"Permission denied when trying to read file: {e}", file_path=source) from e
        except yaml.YAMLError as e:
            raise ParsingError(details=f"Invalid YAML syntax: {e}", file_path=source) from e
        if content is None:
            raise ParsingError(details="The YAML file is empty or contains no valid content.", file_path=source)
        if not isinstance(content, dict):
            raise ParsingError(details="The root of the YAML file must be a dictionary (mapping).", file_path=source)
        return content
