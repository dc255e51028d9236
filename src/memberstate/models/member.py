"""Canonical per-member record.

A :class:`MemberState` is built from two independent partial streams:
membership updates (roles, nick, join time) and presence updates (status,
activity, fallback profile fields). The ``member_set`` / ``presence_set``
flags record which streams have populated the record so far; see
:mod:`memberstate.state.merge` for the merge rules.
"""

from __future__ import annotations

import enum
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from memberstate._constants import ZERO_AVATAR
from memberstate.codec.avatar import format_avatar, parse_avatar
from memberstate.codec.discriminator import format_discriminator
from memberstate.ingestion.normalize import format_timestamp, to_enum
from memberstate.models._base import StateEnum
from memberstate.models.payloads import ActivityPayload, MemberPayload, UserPayload, WireStatus

# ------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------


class PresenceStatus(StateEnum):
    """Online status of a member.

    ``NOT_SET`` until a presence update carrying a status arrives.
    """

    NOT_SET = 0
    ONLINE = 1
    IDLE = 2
    DO_NOT_DISTURB = 3
    INVISIBLE = 4
    OFFLINE = 5

    @classmethod
    def from_wire(cls, value: str | None) -> PresenceStatus | None:
        """Map a gateway status string; ``None`` for empty or unknown text."""
        if not value:
            return None
        try:
            wire = WireStatus(value)
        except ValueError:
            return None
        return _WIRE_STATUS[wire]


_WIRE_STATUS: dict[WireStatus, PresenceStatus] = {
    WireStatus.ONLINE: PresenceStatus.ONLINE,
    WireStatus.IDLE: PresenceStatus.IDLE,
    WireStatus.DO_NOT_DISTURB: PresenceStatus.DO_NOT_DISTURB,
    WireStatus.INVISIBLE: PresenceStatus.INVISIBLE,
    WireStatus.OFFLINE: PresenceStatus.OFFLINE,
}


class ActivityType(enum.IntEnum):
    """Activity kinds. Unmapped kinds are kept as plain ints."""

    GAME = 0
    STREAMING = 1
    LISTENING = 2
    WATCHING = 3
    CUSTOM = 4
    COMPETING = 5


# ------------------------------------------------------------------
# Models
# ------------------------------------------------------------------


class LightActivity(BaseModel):
    """The subset of an activity kept on the record."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = ""
    url: str = ""
    details: str = ""
    state: str = ""
    type: ActivityType | int = ActivityType.GAME

    @classmethod
    def from_payload(cls, activity: ActivityPayload) -> LightActivity:
        return cls(
            name=activity.name,
            url=activity.url,
            details=activity.details,
            state=activity.state,
            type=to_enum(ActivityType, activity.type, ActivityType.GAME),
        )


class MemberState(BaseModel):
    """State of a single guild member.

    Parameters
    ----------
    id : int
        Member (user) id. Frozen after construction.
    joined_at : datetime or None
        When the member joined the guild; ``None`` until a membership
        update carrying a join time has been applied.
    nick : str
        Guild nickname, ``""`` when none is set. Only authoritative once
        ``member_set`` is true.
    roles : tuple of int
        Role ids. Replaced as a whole on every membership update and never
        mutated in place, so snapshots can share it.
    presence_status : PresenceStatus
        Online status, ``NOT_SET`` until a presence update provides one.
    presence_activity : LightActivity or None
        Main activity of the last presence update.
    username : str
        Account username.
    avatar : bytes
        16-byte avatar hash; all zeros when the user has no avatar.
        Written together with ``animated_avatar`` by :meth:`parse_avatar`.
    animated_avatar : bool
        Whether the avatar is animated.
    discriminator : int
        Legacy ``#0000`` tag, 0-9999.
    bot : bool
        Whether the user is a bot.
    member_set : bool
        A membership update has been applied.
    presence_set : bool
        A presence update has been applied.
    """

    model_config = ConfigDict(extra="forbid")

    id: int = Field(frozen=True)
    joined_at: datetime | None = None
    nick: str = ""
    roles: tuple[int, ...] = ()

    presence_status: PresenceStatus = PresenceStatus.NOT_SET
    presence_activity: LightActivity | None = None

    username: str = ""
    avatar: bytes = ZERO_AVATAR
    animated_avatar: bool = False
    discriminator: int = 0

    bot: bool = False
    member_set: bool = False
    presence_set: bool = False

    @property
    def str_id(self) -> str:
        return str(self.id)

    @property
    def str_avatar(self) -> str:
        return format_avatar(self.avatar, self.animated_avatar)

    @property
    def str_discriminator(self) -> str:
        return format_discriminator(self.discriminator)

    def parse_avatar(self, text: str | None) -> None:
        """Set ``avatar`` and ``animated_avatar`` from a wire avatar string."""
        self.avatar, self.animated_avatar = parse_avatar(text)

    def snapshot(self) -> MemberState:
        """Return a shallow copy that is safe to hand to readers.

        Scalar fields of the copy can be changed independently. ``roles``
        is shared with this record; it is a tuple, so the only way to
        change it on either side is to assign a new one.
        """
        return self.model_copy()

    def to_user_payload(self) -> UserPayload:
        return UserPayload(
            id=self.id,
            username=self.username,
            discriminator=self.str_discriminator,
            avatar=self.str_avatar,
            bot=self.bot,
        )

    def to_member_payload(self) -> MemberPayload:
        """Project the record back into a gateway member object."""
        return MemberPayload(
            user=self.to_user_payload(),
            nick=self.nick,
            roles=list(self.roles),
            joined_at=format_timestamp(self.joined_at),
        )
