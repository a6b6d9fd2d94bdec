"""Conversion between key-press schemas and their JSON column form."""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from authly.schemas.rhythm import KeyPress


def dump_key_presses(key_presses: Iterable[KeyPress | dict[str, Any]]) -> list[dict[str, Any]]:
    """Return key presses as plain dicts suitable for a JSON column."""
    dumped: list[dict[str, Any]] = []
    for press in key_presses:
        if isinstance(press, KeyPress):
            dumped.append(press.model_dump())
        else:
            dumped.append({"key": press["key"], "time": press["time"]})
    return dumped


def load_key_presses(raw: Iterable[dict[str, Any]]) -> list[KeyPress]:
    """Rebuild key-press schemas from a JSON column value, preserving order."""
    return [KeyPress(key=item["key"], time=item["time"]) for item in raw]
