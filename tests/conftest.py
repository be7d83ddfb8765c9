"""Shared fixtures for propmap tests."""

from typing import Any, List, Tuple

import pytest

from propmap.config import reset_settings
from propmap.logger import Logger
from propmap.properties import loader


class RecordingLogger(Logger):
    """Logger that keeps every call in memory."""

    def __init__(self) -> None:
        self.records: List[Tuple[str, str, dict]] = []

    def _record(self, level: str, message: str, **kwargs: Any) -> None:
        self.records.append((level, message, kwargs))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._record("DEBUG", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._record("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._record("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._record("ERROR", message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._record("CRITICAL", message, **kwargs)

    def get_session_id(self) -> str:
        return "recorder"

    def messages(self, level: str) -> List[str]:
        return [message for lvl, message, _ in self.records if lvl == level]


@pytest.fixture
def recorder() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Run each test without cached settings or a stray .env file."""
    monkeypatch.chdir(tmp_path)
    for name in ("PROPMAP_ENCODING", "PROPMAP_LOG_LEVEL", "PROPMAP_LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(loader, "_default_logger", None)
    reset_settings()
    yield
    reset_settings()
