"""Data models for member state and gateway payloads."""

from memberstate.models._base import GatewayModel, StateEnum
from memberstate.models.member import ActivityType, LightActivity, MemberState, PresenceStatus
from memberstate.models.payloads import ActivityPayload, MemberPayload, PresencePayload, UserPayload, WireStatus

__all__ = [
    "ActivityPayload",
    "ActivityType",
    "GatewayModel",
    "LightActivity",
    "MemberPayload",
    "MemberState",
    "PresencePayload",
    "PresenceStatus",
    "StateEnum",
    "UserPayload",
    "WireStatus",
]
