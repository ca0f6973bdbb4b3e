# tests/test_log_config.py
import io
import logging

import pytest

from spicenet_core.log_config import setup_logging


@pytest.fixture
def log_stream():
    stream = io.StringIO()
    yield stream
    setup_logging()


class TestSetupLogging:

    def test_records_use_the_package_format(self, log_stream):
        setup_logging(logging.DEBUG, stream=log_stream)

        logging.getLogger("spicenet_core.library.resolver").debug("Found model 'BC547B'.")

        last_line = log_stream.getvalue().splitlines()[-1]
        assert last_line.endswith("[DEBUG] [spicenet_core.library.resolver] Found model 'BC547B'.")

    def test_repeated_setup_keeps_a_single_handler(self, log_stream):
        setup_logging(stream=io.StringIO())
        setup_logging(logging.WARNING, stream=log_stream)

        root_logger = logging.getLogger()
        assert len(root_logger.handlers) == 1
        assert root_logger.level == logging.WARNING

        logging.getLogger("spicenet_core").info("not shown")
        assert log_stream.getvalue() == ""
