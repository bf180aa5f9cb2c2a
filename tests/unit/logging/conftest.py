import pytest

from rendezvous.logging import Entry, LogLevel


@pytest.fixture
def log_path(tmp_path) -> str:
    return str(tmp_path / "logs" / "ring.json")


@pytest.fixture
def sample_entry_factory():
    def create_entry(
        message: str = "Test log message",
        level: LogLevel = LogLevel.INFO,
    ) -> Entry:
        return Entry(message=message, level=level)

    return create_entry
