"""Legacy ``username#0000`` discriminator helpers."""

from __future__ import annotations

import logging

from memberstate._constants import DISCRIMINATOR_MAX, DISCRIMINATOR_WIDTH

_logger = logging.getLogger(__name__)


def format_discriminator(value: int) -> str:
    """Zero-pad a discriminator to four digits.

    Wider values are returned unpadded rather than rejected.
    """
    return str(value).zfill(DISCRIMINATOR_WIDTH)


def parse_discriminator(text: str | None) -> int:
    """Parse a textual discriminator, degrading to ``0``.

    Empty, non-decimal and out-of-range text all yield ``0``.
    """
    if not text:
        return 0
    try:
        value = int(text, 10)
    except ValueError:
        _logger.debug("Unparseable discriminator %r; using 0", text)
        return 0
    if not 0 <= value <= DISCRIMINATOR_MAX:
        _logger.debug("Discriminator %r out of range; using 0", text)
        return 0
    return value
