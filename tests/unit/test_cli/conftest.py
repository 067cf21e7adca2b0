"""Shared fixtures for CLI tests."""

from collections.abc import Iterator

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def cli_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep CLI logs quiet and drop sinks bound to the runner's closed streams."""
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    monkeypatch.setenv("LOG_JSON", "false")
    monkeypatch.delenv("LOG_DIR", raising=False)
    yield
    logger.remove()
