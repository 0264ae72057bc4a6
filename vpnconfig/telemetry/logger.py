"""Diagnostic log sink configuration.

Responsibilities:
- Route `loguru` records emitted by the loader to one plain-text sink.
- Render file/line context bound by the loader in a deterministic format.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

from loguru import logger


def _format_record(record: dict[str, Any]) -> str:
    """Build the loguru format template for one record."""

    extra = record["extra"]
    if "path" in extra and "line" in extra:
        return "[config] level={level} {extra[path]}:{extra[line]}: {message}\n"
    if "path" in extra:
        return "[config] level={level} {extra[path]}: {message}\n"
    return "[config] level={level} {message}\n"


def configure_logging(sink: TextIO | None = None, level: str = "WARNING") -> int:
    """Replace loguru's handlers with a single uncolored sink.

    Args:
        sink: Text stream receiving records, `sys.stderr` by default.
        level: Minimum level name to emit.

    Returns:
        The loguru handler id, usable with `logger.remove`.
    """

    logger.remove()
    return logger.add(
        sink or sys.stderr,
        format=_format_record,
        level=level,
        colorize=False,
    )
