"""Gateway payload shapes consumed and produced by the merge operations.

Field names follow the gateway's snake_case keys. ``nickname``,
``joinedAt`` and ``kind`` are accepted as aliases for ``nick``,
``joined_at`` and ``type``. Snowflake ids arrive as decimal strings and
are coerced to ``int``.

String fields default to ``""``. For presence updates an empty string
means "unchanged"; for membership updates it is taken literally.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import AliasChoices, Field, field_validator

from memberstate.ingestion.normalize import safe_str
from memberstate.models._base import GatewayModel


class WireStatus(StrEnum):
    """Presence status strings as sent by the gateway."""

    ONLINE = "online"
    IDLE = "idle"
    DO_NOT_DISTURB = "dnd"
    INVISIBLE = "invisible"
    OFFLINE = "offline"


class UserPayload(GatewayModel):
    """User object embedded in member and presence payloads.

    Presence updates may carry only ``id``; every other field then keeps
    its empty default.
    """

    id: int
    username: str = ""
    discriminator: str = ""
    avatar: str = ""
    bot: bool = False

    @field_validator("username", "discriminator", "avatar", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return safe_str(value) or ""


class MemberPayload(GatewayModel):
    """Guild member object (``GUILD_MEMBER_ADD`` / ``GUILD_MEMBER_UPDATE``)."""

    user: UserPayload
    nick: str = Field(default="", validation_alias=AliasChoices("nick", "nickname"))
    roles: list[int] = Field(default_factory=list)
    joined_at: str = Field(default="", validation_alias=AliasChoices("joined_at", "joinedAt"))


class ActivityPayload(GatewayModel):
    """One entry of a presence's ``activities`` list."""

    name: str = ""
    url: str = ""
    details: str = ""
    state: str = ""
    type: int = Field(default=0, validation_alias=AliasChoices("type", "kind"))


class PresencePayload(GatewayModel):
    """Presence update (``PRESENCE_UPDATE``)."""

    user: UserPayload
    status: str = ""
    activities: list[ActivityPayload] = Field(default_factory=list)
    nick: str = Field(default="", validation_alias=AliasChoices("nick", "nickname"))
