"""Custom exception hierarchy for memberstate.

Malformed *fields* never raise: they degrade to a default (see
:mod:`memberstate.ingestion.normalize`). Only structural problems with an
update as a whole surface as exceptions.
"""

from __future__ import annotations


class MemberStateError(Exception):
    """Base exception for all memberstate errors."""


class MemberStateConfigError(MemberStateError):
    """Invalid merge configuration."""


class PayloadError(MemberStateError):
    """A raw gateway dict could not be turned into a payload model."""

    def __init__(self, message: str, *, kind: str = "") -> None:
        self.kind = kind
        super().__init__(message)


class UnknownMemberError(MemberStateError):
    """Presence update for a member that has no record yet.

    Raised only when :attr:`MergeConfig.allow_presence_create` is off.
    """

    def __init__(self, member_id: int) -> None:
        self.member_id = member_id
        super().__init__(f"no member record for {member_id}")


class MemberMismatchError(MemberStateError):
    """An update was applied to the record of a different member."""

    def __init__(self, *, record_id: int, payload_id: int) -> None:
        self.record_id = record_id
        self.payload_id = payload_id
        super().__init__(f"update for member {payload_id} applied to record {record_id}")
