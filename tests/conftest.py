"""Shared fixtures for quire tests."""

from __future__ import annotations

import pytest


class MockLogger:
    """Logger stand-in that records messages by level."""

    def __init__(self) -> None:
        self.messages: dict[str, list[str]] = {
            "debug": [],
            "info": [],
            "warning": [],
            "error": [],
        }

    def debug(self, msg: str) -> None:
        self.messages["debug"].append(msg)

    def info(self, msg: str) -> None:
        self.messages["info"].append(msg)

    def warning(self, msg: str) -> None:
        self.messages["warning"].append(msg)

    def error(self, msg: str) -> None:
        self.messages["error"].append(msg)


@pytest.fixture
def mock_logger() -> MockLogger:
    return MockLogger()
