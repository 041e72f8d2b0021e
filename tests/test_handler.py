import io
import logging
import pytest
from duallog.logger import Logger
from duallog.utils.monitoring_utils.handler import DualSinkHandler, SUCCESS_LEVEL


@pytest.fixture
def bridged():
    stream = io.StringIO()
    dual_logger = Logger("Bridge", stream=stream)
    handler = DualSinkHandler(dual_logger)
    std_logger = logging.getLogger("duallog-tests.bridge")
    std_logger.setLevel(logging.DEBUG)
    std_logger.propagate = False
    std_logger.addHandler(handler)
    yield std_logger, stream
    std_logger.removeHandler(handler)


def test_levels_map_to_severities(bridged):
    std_logger, stream = bridged
    std_logger.debug("debugging")
    std_logger.info("informing")
    std_logger.log(SUCCESS_LEVEL, "succeeded")
    std_logger.warning("warned")
    std_logger.error("failed %s", "badly")
    std_logger.critical("crashed")

    lines = stream.getvalue().splitlines()
    assert [line.split("] [")[2].split("]")[0] for line in lines] == [
        "MESSAGE", "MESSAGE", "SUCCESS", "WARNING", "ERROR..", "ERROR..",
    ]
    assert lines[4].endswith("failed badly")


def test_success_level_is_named():
    assert logging.getLevelName(SUCCESS_LEVEL) == "SUCCESS"
