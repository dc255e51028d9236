"""Base model and enum for gateway payloads and member state.

Every wire payload model inherits from :class:`GatewayModel` which
provides:

* Frozen instances that ignore unknown keys.
* A ``model_validator(mode="before")`` that drops ``null`` values so the
  field default is used. The gateway sends ``null`` for "nothing set"
  (e.g. ``nick`` or ``avatar``); empty strings are kept because they mean
  "unchanged" in presence updates.
* A ``raw`` dict that captures the original payload.

State enums inherit from :class:`StateEnum` whose ``_missing_`` hook
returns ``UNKNOWN`` (or the first member) for unmapped values instead of
raising ``ValueError``.
"""

from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class StateEnum(enum.IntEnum):
    """Base for state enums.

    Subclasses may define ``UNKNOWN``; otherwise the first member is the
    fallback for unmapped values.
    """

    @classmethod
    def _missing_(cls, value: object) -> StateEnum:
        if hasattr(cls, "UNKNOWN"):
            unknown: StateEnum = cls.UNKNOWN  # type: ignore[attr-defined]
            return unknown
        return next(iter(cls))


class GatewayModel(BaseModel):
    """Base for gateway payload models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    raw: dict[str, Any] = Field(default_factory=dict, exclude=True)
    """Original gateway dict."""

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, values: Any) -> Any:
        """Drop ``null`` values and stash the raw payload."""
        if not isinstance(values, dict):
            return values
        cleaned = {key: value for key, value in values.items() if value is not None}
        # Keep an explicitly passed raw= (kwargs construction).
        if "raw" not in values:
            cleaned["raw"] = dict(values)
        return cleaned
