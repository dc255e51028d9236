"""Normalization helpers.

Centralizes defensive parsing of textual gateway fields. None of these
raise: a malformed field degrades to ``None`` (or a documented default)
so the rest of the update still applies.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from enum import IntEnum
from typing import Any, TypeVar

_logger = logging.getLogger(__name__)

TEnum = TypeVar("TEnum", bound=IntEnum)


def safe_int(value: Any) -> int | None:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def to_enum(enum_cls: type[TEnum], value: Any, default: TEnum | None = None) -> TEnum | int | None:
    parsed = safe_int(value)
    if parsed is None:
        return default
    try:
        return enum_cls(parsed)
    except ValueError:
        return parsed


def safe_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text if text else None


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an ISO-8601 gateway timestamp.

    - Empty/missing -> None
    - Unparseable -> None
    - Naive values are assumed to be UTC
    """
    if not value:
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        _logger.debug("Unparseable timestamp %r", value)
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed


def format_timestamp(value: datetime | None) -> str:
    """Render a timestamp for re-emission; unknown renders as ``""``."""
    if value is None:
        return ""
    return value.isoformat()

