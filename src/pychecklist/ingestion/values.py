"""Defensive value helpers shared by the ingestion functions."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def safe_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text if text else None


def is_record(value: Any) -> bool:
    """Return True for a keyed record (a JSON object), never for a list or scalar."""
    return isinstance(value, Mapping)


def is_item_list(value: Any) -> bool:
    """Return True for a JSON array (list or tuple); strings do not count."""
    return isinstance(value, (list, tuple))


def is_defined(record: Mapping[str, Any], key: str) -> bool:
    """Return True when *record* owns *key* with a non-null value."""
    return key in record and record[key] is not None
