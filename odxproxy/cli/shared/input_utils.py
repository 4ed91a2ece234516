"""Parsing helpers for CLI option values."""

from __future__ import annotations

import json
from typing import Any


def parse_json_option(raw: str | None, *, default: Any, option: str) -> Any:
    """Parse a JSON option value; raise ValueError naming the option on bad input."""
    if raw is None or not raw.strip():
        return default
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"{option} is not valid JSON: {exc.msg}") from exc
