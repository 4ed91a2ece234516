"""Loguru helpers for CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

_SINK_IDS: dict[str, int] = {}
_stderr_sink_id: int | None = None


def configure_console_logging(verbose: bool = False) -> None:
    """Replace the stderr sink; DEBUG when verbose, WARNING otherwise. File sinks are kept."""
    global _stderr_sink_id
    if _stderr_sink_id is None:
        # First call drops loguru's default handler along with anything added before us.
        logger.remove()
        _SINK_IDS.clear()
    else:
        logger.remove(_stderr_sink_id)
    _stderr_sink_id = logger.add(
        sys.stderr, level="DEBUG" if verbose else "WARNING", backtrace=False, diagnose=False
    )


def ensure_rotating_log_file(name: str, level: str = "INFO") -> Path:
    """Ensure a rotating log sink for the given command name."""
    log_dir = Path.home() / ".odxproxy" / "logs"
    log_path = log_dir / f"{name}.log"
    if name in _SINK_IDS:
        return log_path
    log_dir.mkdir(parents=True, exist_ok=True)
    sink_id = logger.add(
        str(log_path),
        level=level,
        rotation="10 MB",
        retention="14 days",
        enqueue=True,
        encoding="utf-8",
        backtrace=False,
        diagnose=False,
    )
    _SINK_IDS[name] = sink_id
    return log_path
