# src/spicenet_core/netlist/serializer.py
"""
Defines the NetlistSerializer, which turns an in-memory `Circuit` tree into SPICE
netlist lines.

A rendered netlist has four sections, in this order:

1.  `.include` lines for every library file the circuit's transistors and
    sub-circuit instances need, found through the circuit's search paths.
2.  One `.subckt ... .ends` block per local sub-circuit, with the nested circuit
    rendered recursively (including its own `.include` lines).
3.  One line per element, in insertion order.
4.  A closing `.end`, for the outermost circuit only.
"""
import logging
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, TextIO, Union, TYPE_CHECKING

from ..components.base import CircuitElement
from ..library import ModelResolver
from .exceptions import NetlistWriteError

if TYPE_CHECKING:
    from ..data_structures import Circuit

logger = logging.getLogger(__name__)

ResolverFactory = Callable[[Sequence[str]], ModelResolver]


def format_element(element: CircuitElement) -> str:
    """
    Formats one element line: `<reference> <nodes...> <value>`.

    Resistors, capacitors and diodes only get their prefix letter if the stored
    reference does not already start with it ('R1' stays 'R1', '1' becomes 'R1').
    Transistors, sub-circuit instances and voltage sources always get it, so a
    transistor stored as 'Q1' is written 'QQ1'.
    """
    reference = element.reference
    if not (element.conditional_prefix and reference.startswith(element.spice_prefix)):
        reference = f"{element.spice_prefix}{reference}"
    return " ".join([reference, *element.get_nodes(), element.get_value()])


class NetlistSerializer:
    """
    Renders circuits to netlist lines and writes them out.

    Library lookups go through a fresh resolver per rendered circuit level; nothing
    is cached between `render` calls.
    """

    def __init__(self, resolver_factory: ResolverFactory = ModelResolver):
        self._resolver_factory = resolver_factory

    def render(self, circuit: "Circuit", close: bool = True) -> List[str]:
        """
        Renders `circuit` and, recursively, its local sub-circuits.

        Args:
            circuit: The circuit to render.
            close: Whether to append the final `.end` line. Nested sub-circuit bodies
                   are always rendered with `close=False`.

        Raises:
            ModelNotFoundError: If an externally referenced name is not defined on
                                the search paths.
            ModelLibraryReadError: If a search path cannot be read.
        """
        lines: List[str] = []

        for path in self.collect_includes(circuit).values():
            lines.append(f".include {path}")

        for name, definition in circuit.subcircuits.items():
            lines.append(f".subckt {name} {' '.join(definition.nodes)}")
            lines.extend(self.render(definition.circuit, close=False))
            lines.append(".ends")

        for element in circuit.elements:
            lines.append(format_element(element))

        if close:
            lines.append(".end")
        logger.debug(f"Rendered circuit '{circuit.name}' to {len(lines)} line(s).")
        return lines

    def collect_includes(self, circuit: "Circuit") -> Dict[str, str]:
        """
        Resolves every external name used by the circuit's own elements.

        Names defined as local sub-circuits are skipped, as are names already
        present in the include set (including file names added by an earlier
        resolution). When two resolutions report the same key, the first path
        is kept. The result preserves discovery order, so rendering an unchanged
        circuit against an unchanged library is deterministic.
        """
        includes: Dict[str, str] = {}
        resolver = self._resolver_factory(circuit.search_paths)
        for element in circuit.elements:
            name = element.external_name
            if name is None or name in includes or name in circuit.subcircuits:
                continue
            for key, path in resolver.resolve(name).items():
                includes.setdefault(key, path)
        return includes

    def save(self, circuit: "Circuit", filename: Optional[Union[str, Path]] = None) -> None:
        """
        Renders the closed netlist and writes one statement per line to `filename`,
        or to standard output when no file name is given.

        Raises:
            NetlistWriteError: If the file cannot be written.
        """
        lines = self.render(circuit, close=True)
        if filename is None:
            self._write_lines(sys.stdout, lines)
            sys.stdout.flush()
            return

        path = Path(filename)
        try:
            with path.open("w", encoding="utf-8") as f:
                self._write_lines(f, lines)
        except OSError as e:
            raise NetlistWriteError(path=path, details=f"Cannot write netlist file: {e}") from e
        logger.info(f"Wrote netlist for '{circuit.name}' to '{path}'.")

    @staticmethod
    def _write_lines(stream: TextIO, lines: List[str]) -> None:
        for line in lines:
            stream.write(f"{line}\n")
