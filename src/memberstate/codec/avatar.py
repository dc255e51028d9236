"""Avatar hash codec.

The gateway sends avatars as 32 hex characters, prefixed with ``a_`` when
the avatar is animated. Records keep the 16 raw bytes plus a flag instead.
"""

from __future__ import annotations

import logging
import re

from memberstate._constants import ANIMATED_AVATAR_PREFIX, AVATAR_HASH_SIZE, ZERO_AVATAR

_logger = logging.getLogger(__name__)

_HEX_PAIRS = re.compile(r"(?:[0-9a-fA-F]{2})*")


def parse_avatar(text: str | None) -> tuple[bytes, bool]:
    """Decode a wire avatar string into ``(hash, animated)``.

    Malformed input is never fatal: only the leading run of valid hex
    pairs is decoded and the rest of the hash stays zero-filled.
    """
    text = text or ""
    animated = text.startswith(ANIMATED_AVATAR_PREFIX)
    if animated:
        text = text[len(ANIMATED_AVATAR_PREFIX) :]

    match = _HEX_PAIRS.match(text)
    valid = match.group(0) if match else ""
    if len(valid) != len(text):
        _logger.debug("Malformed avatar hash %r; decoded %d valid hex characters", text, len(valid))

    decoded = bytes.fromhex(valid[: AVATAR_HASH_SIZE * 2])
    return decoded.ljust(AVATAR_HASH_SIZE, b"\x00"), animated


def format_avatar(avatar: bytes, animated: bool) -> str:
    """Encode ``(hash, animated)`` back to the wire form.

    The all-zero hash means "no custom avatar" and encodes to ``""``
    whatever the animated flag says.
    """
    if avatar == ZERO_AVATAR:
        return ""
    text = avatar.hex()
    if animated:
        return ANIMATED_AVATAR_PREFIX + text
    return text
