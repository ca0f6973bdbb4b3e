# src/spicenet_core/simulation/execution.py
import logging
from typing import List, Optional, TYPE_CHECKING

from ..errors import DiagnosableError, SimulationRunError
from ..netlist import NetlistSerializer
from .engine import EngineFactory, EngineLog
from .ngspice import NgspiceBatchEngine
from .results import SimulationResult

if TYPE_CHECKING:
    from ..data_structures import Circuit

logger = logging.getLogger(__name__)

AC_VARIATIONS = ("dec", "oct", "lin")


class Simulation:
    """
    Hands a circuit to an external SPICE engine and collects the result vectors.

    Every analysis renders the circuit afresh (so library models are re-resolved)
    and runs on a new engine built by `engine_factory`. The console output of the
    last run is kept on `buffer`, also when the run failed.
    """

    def __init__(
        self,
        circuit: "Circuit",
        engine_factory: EngineFactory = NgspiceBatchEngine,
        serializer: Optional[NetlistSerializer] = None,
    ):
        self.circuit = circuit
        self.buffer: Optional[List[str]] = None
        self._engine_factory = engine_factory
        self._serializer = serializer or NetlistSerializer()

    def tran(self, step: str, stop: str, start: str) -> SimulationResult:
        """Transient analysis from `start` to `stop` with time step `step`."""
        return self.run(f"tran {step} {stop} {start}")

    def ac(
        self, start_frequency: str, stop_frequency: str, number_of_points: int, variation: str
    ) -> SimulationResult:
        """
        Small-signal AC sweep. `variation` is 'dec', 'oct' or 'lin'; `number_of_points`
        is per decade or octave, or in total for a linear sweep.
        """
        if variation.lower() not in AC_VARIATIONS:
            raise ValueError(f"AC variation must be one of {AC_VARIATIONS}, got '{variation}'.")
        if int(number_of_points) < 1:
            raise ValueError(f"AC sweep needs at least one point, got {number_of_points}.")
        return self.run(f"ac {variation} {int(number_of_points)} {start_frequency} {stop_frequency}")

    def run(self, analysis: str) -> SimulationResult:
        """
        Renders the circuit, submits it with `analysis` and reads back every vector
        of the resulting plot.

        Raises:
            SimulationRunError: If the netlist cannot be rendered or the engine fails.
        """
        log = EngineLog()
        try:
            netlist = self._serializer.render(self.circuit, close=True)
            engine = self._engine_factory(log)
            engine.circuit(netlist)
            engine.command(analysis)
            plot = engine.current_plot()
            vectors = {}
            for name in engine.all_vectors(plot):
                info = engine.vector_info(name)
                vectors[info.name] = info.data
        except DiagnosableError as e:
            raise SimulationRunError(e.get_diagnostic_report()) from e
        finally:
            self.buffer = list(log.lines)

        logger.info(
            f"'{analysis}' on '{self.circuit.name}' returned {len(vectors)} vector(s); "
            f"exit status {log.status}, unload={log.unload}, quit={log.quit}"
        )
        return SimulationResult(
            analysis=analysis,
            vectors=vectors,
            log=list(log.lines),
            status=log.status,
            unload=log.unload,
            quit=log.quit,
        )
