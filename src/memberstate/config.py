"""Merge configuration for memberstate."""

from __future__ import annotations

import dataclasses

from memberstate.exceptions import MemberStateConfigError


@dataclasses.dataclass(frozen=True)
class MergeConfig:
    """Options for the merge operations.

    Parameters
    ----------
    allow_presence_create : bool
        Create a fresh record when a presence update arrives for a member
        without one. When ``False`` such updates raise
        :class:`~memberstate.exceptions.UnknownMemberError` so the owning
        container can decide what to do.
    check_member_id : bool
        Reject updates whose user id differs from the target record's id
        with :class:`~memberstate.exceptions.MemberMismatchError`.
    """

    allow_presence_create: bool = True
    check_member_id: bool = True

    def __post_init__(self) -> None:
        for name in ("allow_presence_create", "check_member_id"):
            if not isinstance(getattr(self, name), bool):
                raise MemberStateConfigError(f"{name} must be a bool, got {getattr(self, name)!r}")
