import logging

import pytest

from coinflip.core import setup


@pytest.fixture(autouse=True)
def silence_after():
    yield
    setup.setup_logging(0)


@pytest.mark.parametrize(
    "verbosity,level",
    [(0, logging.CRITICAL + 1), (1, logging.INFO), (2, logging.DEBUG), (3, setup.TRACE), (9, setup.TRACE)],
)
def test_verbosity_levels(verbosity: int, level: int) -> None:
    setup.setup_logging(verbosity)
    assert setup.logger.level == level


def test_trace_level_registered() -> None:
    assert logging.getLevelName(setup.TRACE) == "TRACE"
    assert hasattr(setup.logger, "trace")


def test_log_file(tmp_path) -> None:
    setup.setup_logging(1, tmp_path / "logs")
    setup.logger.info("hello from the test")
    for handler in logging.getLogger().handlers:
        handler.flush()
    log_file = tmp_path / "logs" / "coinflip.log"
    assert log_file.exists()
    assert "hello from the test" in log_file.read_text()
