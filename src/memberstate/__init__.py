"""memberstate - Guild member record reconciliation for chat gateways."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("memberstate")
except PackageNotFoundError:
    __version__ = "0+local"
from memberstate.codec import format_avatar, format_discriminator, parse_avatar, parse_discriminator
from memberstate.config import MergeConfig
from memberstate.exceptions import (
    MemberMismatchError,
    MemberStateConfigError,
    MemberStateError,
    PayloadError,
    UnknownMemberError,
)
from memberstate.ingestion.apply import apply_member_event, apply_presence_event
from memberstate.models import (
    ActivityPayload,
    ActivityType,
    LightActivity,
    MemberPayload,
    MemberState,
    PresencePayload,
    PresenceStatus,
    UserPayload,
)
from memberstate.state.merge import apply_member_update, apply_presence_update, member_from_payload

__all__ = [
    "__version__",
    "ActivityPayload",
    "ActivityType",
    "LightActivity",
    "MemberMismatchError",
    "MemberPayload",
    "MemberState",
    "MemberStateConfigError",
    "MemberStateError",
    "MergeConfig",
    "PayloadError",
    "PresencePayload",
    "PresenceStatus",
    "UnknownMemberError",
    "UserPayload",
    "apply_member_event",
    "apply_member_update",
    "apply_presence_event",
    "apply_presence_update",
    "format_avatar",
    "format_discriminator",
    "member_from_payload",
    "parse_avatar",
    "parse_discriminator",
]
