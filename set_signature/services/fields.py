"""Presence check shared by every optional signature fragment."""

from __future__ import annotations

from typing import Any


def is_valid(value: Any) -> bool:
    """Return True when an optional field has content.

    Only ``None`` and the empty string count as missing; whitespace is content.
    """
    return value is not None and value != ""
