"""Wire codecs for compact identity fields."""

from memberstate.codec.avatar import format_avatar, parse_avatar
from memberstate.codec.discriminator import format_discriminator, parse_discriminator

__all__ = [
    "format_avatar",
    "format_discriminator",
    "parse_avatar",
    "parse_discriminator",
]
