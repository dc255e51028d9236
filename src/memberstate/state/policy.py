"""Deterministic merge precedence rules.

This module intentionally contains *no* payload parsing. It only answers
"which value wins" questions for the merge operations.
"""

from __future__ import annotations

from collections.abc import Sequence

from memberstate.models.member import ActivityType, MemberState
from memberstate.models.payloads import ActivityPayload


def presence_owns_nick(state: MemberState) -> bool:
    """Presence may only set the nick before any membership data arrived.

    Once ``member_set`` is true, membership updates own the nick.
    """
    return not state.member_set


def should_patch(value: str | None) -> bool:
    """Presence updates use ``""`` for "unchanged"."""
    return bool(value)


def select_main_activity(activities: Sequence[ActivityPayload]) -> ActivityPayload | None:
    """Pick the activity to display out of the concurrent ones.

    The first activity wins unless a later one is streaming; every
    streaming activity after the first replaces the choice, so the last
    streaming activity wins.
    """
    main: ActivityPayload | None = None
    for index, activity in enumerate(activities):
        if index == 0 or activity.type == ActivityType.STREAMING:
            main = activity
    return main
