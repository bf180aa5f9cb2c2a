import pytest

from rendezvous.logging import LoggingConfig


@pytest.fixture(autouse=True)
def reset_logging_config():
    yield
    LoggingConfig().update(
        log_level="info",
        log_output="stdout",
        disabled_loggers=[],
    )
