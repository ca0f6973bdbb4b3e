# tests/conftest.py
import pytest
from pathlib import Path

from spicenet_core import Circuit


# Library contents used throughout the suite. TL072 is a sub-circuit without
# dependencies, BC547B is a model whose file includes a sibling library, and
# BC556B lives in that sibling library.
TL072_LIB = """* TL072 operational amplifier macromodel
.SUBCKT TL072 1 2 3 4 5
C1 11 12 3.498E-12
R2 6 9 100.0E3
.ENDS
"""

BC547_MOD = """* BC547B NPN model
.include bc5x7.lib
.model BC547B NPN(IS=2.39E-14 NF=1.008 BF=294.3 VAF=63.2)
"""

BC5X7_LIB = """* Shared PNP library
.MODEL BC556B PNP(IS=3.83E-14 NF=1.008 BF=255 VAF=42)
"""


def create_spice_library(root: Path) -> Path:
    """Writes the standard model library into `root/spice` and returns that directory."""
    library_dir = root / "spice"
    library_dir.mkdir(parents=True, exist_ok=True)
    (library_dir / "TL072.lib").write_text(TL072_LIB)
    (library_dir / "BC547.mod").write_text(BC547_MOD)
    (library_dir / "bc5x7.lib").write_text(BC5X7_LIB)
    return library_dir


@pytest.fixture
def spice_library(tmp_path) -> Path:
    """A fresh model library directory for each test."""
    return create_spice_library(tmp_path)


@pytest.fixture
def amplifier(spice_library) -> Circuit:
    """A small circuit using a library transistor, a library op-amp and local parts."""
    circuit = Circuit(name="amplifier", search_paths=[str(spice_library)])
    circuit.add_voltage_source("1", "vcc", "0", "5")
    circuit.add_resistor("R1", "vcc", "base", "100k")
    circuit.add_transistor("1", "out", "base", "0", "BC547B")
    circuit.add_subcircuit_instance("1", ["out", "inv", "vcc", "0", "buf"], "TL072")
    circuit.add_capacitor("2", "buf", "0", "10n")
    return circuit
