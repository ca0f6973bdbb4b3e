# src/spicenet_core/components/base.py

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, ClassVar, Optional, Sequence

from .exceptions import ElementDefinitionError


logger = logging.getLogger(__name__)


@dataclass
class CircuitElement(ABC):
    """
    The abstract base class for every element that can appear on a netlist line.

    An element is a plain, mutable record: a user-supplied reference, the nodes it
    connects, and one opaque value token (a magnitude, an expression, a model name
    or a sub-circuit name). Values are never interpreted numerically.

    Subclasses describe how they are written to a netlist through class-level
    declarations rather than by formatting themselves:

    - `spice_prefix`: the canonical one-letter SPICE prefix (e.g. 'R').
    - `conditional_prefix`: if True, the prefix is only prepended when the stored
      reference does not already start with it. If False, it is always prepended.
    - `node_count`: the number of nodes the element connects, or None if variable.
    - `value_field`: the attribute patched by `Circuit.set_value`, or None if the
      element cannot be tuned.
    """
    reference: str

    element_type_str: ClassVar[str] = "BaseElement"
    spice_prefix: ClassVar[str] = ""
    conditional_prefix: ClassVar[bool] = False
    node_count: ClassVar[Optional[int]] = None
    value_field: ClassVar[Optional[str]] = None

    @abstractmethod
    def get_nodes(self) -> List[str]:
        """Returns the connected node names in netlist order."""
        pass

    @abstractmethod
    def get_value(self) -> str:
        """Returns the trailing value token of the element's netlist line."""
        pass

    @classmethod
    @abstractmethod
    def from_nodes(cls, reference: str, nodes: Sequence[str], value: str) -> "CircuitElement":
        """Constructs the element from an ordered node list and a value token."""
        pass

    @property
    def external_name(self) -> Optional[str]:
        """
        The name of a model or sub-circuit this element needs from outside the
        circuit, or None. Only these names are handed to the model resolver.
        """
        return None

    @property
    def is_tunable(self) -> bool:
        return self.value_field is not None

    def set_value(self, value: str) -> None:
        if self.value_field is None:
            raise TypeError(f"{type(self).__name__} '{self.reference}' has no tunable value.")
        setattr(self, self.value_field, value)

    @classmethod
    def _check_node_count(cls, reference: str, nodes: Sequence[str]) -> None:
        if cls.node_count is not None and len(nodes) != cls.node_count:
            raise ElementDefinitionError(
                element_type=cls.element_type_str,
                reference=reference,
                details=f"Expected {cls.node_count} node(s) but got {len(nodes)}: {list(nodes)}."
            )


# --- Global Element Registry and Decorator ---

ELEMENT_REGISTRY: Dict[str, type[CircuitElement]] = {}


def register_element(type_str: str):
    """
    A class decorator to register an element class in the global element registry,
    making it available to the circuit description parser and builder.
    """
    def decorator(cls: type[CircuitElement]):
        if not issubclass(cls, CircuitElement):
            raise TypeError(f"Class {cls.__name__} must inherit from CircuitElement.")

        prefix = cls.spice_prefix
        if not (isinstance(prefix, str) and len(prefix) == 1 and prefix.isupper()):
            raise TypeError(
                f"Element class '{cls.__name__}' violates API contract. "
                f"spice_prefix must be a single upper-case letter, but is {prefix!r}."
            )

        if type_str in ELEMENT_REGISTRY:
            logger.warning(f"Element type '{type_str}' is being redefined/overwritten.")
        cls.element_type_str = type_str
        ELEMENT_REGISTRY[type_str] = cls
        logger.debug(f"Registered element type '{type_str}' -> {cls.__name__}")
        return cls

    return decorator
