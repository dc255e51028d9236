"""Internal constants shared across the library."""

# Prefix the gateway puts in front of an animated avatar hash.
ANIMATED_AVATAR_PREFIX = "a_"

AVATAR_HASH_SIZE = 16
ZERO_AVATAR: bytes = bytes(AVATAR_HASH_SIZE)
"""All-zero avatar hash: the user has no custom avatar."""

DISCRIMINATOR_WIDTH = 4
DISCRIMINATOR_MAX = 9999
