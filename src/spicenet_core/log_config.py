# --- src/spicenet_core/log_config.py ---
import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)-5.5s] [%(name)s] %(message)s"


def setup_logging(level=logging.INFO, stream=None):
    """
    Sends every log record at `level` or above to `stream` (stdout by default).

    Called once when the package is imported. Calling it again replaces the
    previous handler, e.g. `setup_logging(logging.DEBUG)` to also see library
    lookups and the simulation engine's console output.
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stdout if stream is None else stream)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)
    root_logger.setLevel(level)
    logging.getLogger(__name__).debug(f"Logging configured at level {logging.getLevelName(level)}.")
