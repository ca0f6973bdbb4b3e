# src/spicenet_core/simulation/ngspice.py
"""
A `SpiceEngine` that runs the ngspice executable in batch mode.

Every `command` writes a complete deck to a temporary directory: a title line, the
circuit lines, and a `.control` block that runs the analysis and writes all vectors
of the resulting plot to an ASCII rawfile, which is read back once ngspice exits.
"""
import logging
import os
import platform
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import List, Optional

from .engine import EngineLog, VectorInfo
from .exceptions import EngineError
from .rawfile import RawPlot, read_raw_file

logger = logging.getLogger(__name__)

DECK_TITLE = "* spicenet_core netlist"

_COMMON_INSTALL_PATHS = {
    "Windows": [
        r"C:\Program Files\Spice64\bin\ngspice.exe",
        r"C:\Program Files\ngspice\bin\ngspice.exe",
        r"C:\Program Files (x86)\ngspice\bin\ngspice.exe",
        r"C:\ngspice\bin\ngspice.exe",
    ],
    "Linux": ["/usr/bin/ngspice", "/usr/local/bin/ngspice"],
    "Darwin": ["/usr/local/bin/ngspice", "/opt/homebrew/bin/ngspice"],
}


def find_ngspice() -> Optional[str]:
    """Finds the ngspice executable on PATH, then in common installation directories."""
    which_result = shutil.which("ngspice")
    if which_result:
        return which_result
    for candidate in _COMMON_INSTALL_PATHS.get(platform.system(), []):
        if os.path.exists(candidate):
            return candidate
    return None


class NgspiceBatchEngine:
    """Runs each analysis as a separate `ngspice -b` process."""

    def __init__(self, log: EngineLog, ngspice_cmd: Optional[str] = None, timeout: float = 60.0):
        self.log = log
        self.ngspice_cmd = ngspice_cmd
        self.timeout = timeout
        self._circuit: List[str] = []
        self._plots: List[RawPlot] = []

    def circuit(self, lines: List[str]) -> None:
        self._circuit = list(lines)
        self._plots = []

    def build_deck(self, command: str, raw_path: Path) -> List[str]:
        """The deck ngspice runs for `command`. The circuit's own `.end`, if any, moves after the control block."""
        body = [line for line in self._circuit if line.strip().lower() != ".end"]
        return [
            DECK_TITLE,
            *body,
            ".control",
            "set filetype=ascii",
            command,
            f"write {raw_path}",
            ".endc",
            ".end",
        ]

    def command(self, command: str) -> None:
        ngspice_cmd = self.ngspice_cmd or find_ngspice()
        if ngspice_cmd is None:
            raise EngineError(details="ngspice executable not found on PATH or in common install locations.")

        with tempfile.TemporaryDirectory(prefix="spicenet_") as work_dir:
            deck_path = Path(work_dir) / "circuit.cir"
            raw_path = Path(work_dir) / "output.raw"
            deck_path.write_text("\n".join(self.build_deck(command, raw_path)) + "\n", encoding="utf-8")

            logger.info(f"Running '{command}' with {ngspice_cmd}")
            try:
                result = subprocess.run(
                    [ngspice_cmd, "-b", str(deck_path)],
                    capture_output=True,
                    text=True,
                    timeout=self.timeout,
                )
            except subprocess.TimeoutExpired as e:
                raise EngineError(details=f"Simulation timed out after {self.timeout} seconds.") from e
            except OSError as e:
                raise EngineError(details=f"Cannot start ngspice: {e}") from e

            for line in (result.stdout + result.stderr).splitlines():
                self.log.send_char(line)
            self.log.controlled_exit(result.returncode, False, True)

            if result.returncode != 0:
                raise EngineError(details=f"ngspice failed running '{command}'.", status=result.returncode)
            if not raw_path.is_file():
                raise EngineError(details=f"ngspice produced no result vectors for '{command}'.", status=result.returncode)
            self._plots = read_raw_file(raw_path.read_text(encoding="utf-8", errors="replace"))

        if not self._plots:
            raise EngineError(details=f"The rawfile for '{command}' holds no plots.", status=result.returncode)

    def _plot(self, name: Optional[str] = None) -> RawPlot:
        if not self._plots:
            raise EngineError(details="No analysis has been run on this engine yet.")
        if name is None:
            return self._plots[-1]
        for plot in self._plots:
            if plot.plot_name == name:
                return plot
        raise EngineError(details=f"Unknown plot '{name}'.")

    def current_plot(self) -> str:
        return self._plot().plot_name

    def all_vectors(self, plot: str) -> List[str]:
        return list(self._plot(plot).vectors)

    def vector_info(self, name: str) -> VectorInfo:
        vectors = self._plot().vectors
        if name not in vectors:
            raise EngineError(details=f"Unknown vector '{name}' in plot '{self.current_plot()}'.")
        return VectorInfo(name=name, data=vectors[name])
