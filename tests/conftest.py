"""Shared pytest fixtures for the full vpnconfig test suite."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path
import sys

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _reset_loguru_handlers() -> Iterator[None]:
    """Restore loguru's default stderr handler after CLI tests replace it."""

    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper writing configuration text to a temporary file."""

    def _write(text: str, name: str = "config") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Collect `LEVEL: message` strings emitted through loguru during a test."""

    messages: list[str] = []
    handler_id = logger.add(
        lambda message: messages.append(
            f"{message.record['level'].name}: {message.record['message']}"
        ),
        level="DEBUG",
        format="{message}",
    )
    yield messages
    logger.remove(handler_id)
