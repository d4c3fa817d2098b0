"""Pytest fixtures for FileTool tests."""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

import pytest

from filetool.foundation.config import reset_config


class RecordingSink:
    """Error sink that remembers every (message, status) it receives."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, int]] = []

    def __call__(self, message: str, status: int) -> None:
        self.calls.append((message, status))


@pytest.fixture(autouse=True)
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Run every test in an empty working directory with a clean config.

    Operations take paths relative to the working directory; directory
    paths lose characters like "-" and "_" when sanitized, so tests never
    pass tmp_path itself.
    """
    for key in list(os.environ):
        if key.startswith("FILETOOL_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))

    root = tmp_path / "ws"
    root.mkdir()
    monkeypatch.chdir(root)

    reset_config()
    yield root
    reset_config()


@pytest.fixture(autouse=True)
def _restore_root_logger() -> None:
    """configure_logging() replaces root handlers; put them back."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def sink() -> RecordingSink:
    """Create a recording error sink."""
    return RecordingSink()
