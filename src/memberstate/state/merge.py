"""Membership and presence merge operations.

Both operations mutate a single :class:`MemberState` in place and return
it. They perform no locking: the owning container serializes calls for a
given record and hands readers :meth:`MemberState.snapshot` copies.

Textual fields never make a merge fail. A malformed discriminator becomes
``0``, a malformed avatar decodes partially, an unparseable join time or
unknown status leaves the current value alone.
"""

from __future__ import annotations

import logging

from memberstate.codec.discriminator import parse_discriminator
from memberstate.config import MergeConfig
from memberstate.exceptions import MemberMismatchError, UnknownMemberError
from memberstate.ingestion.normalize import parse_timestamp
from memberstate.models.member import LightActivity, MemberState, PresenceStatus
from memberstate.models.payloads import MemberPayload, PresencePayload, UserPayload
from memberstate.state.policy import presence_owns_nick, select_main_activity, should_patch

_logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = MergeConfig()


def _check_target(state: MemberState, user: UserPayload, config: MergeConfig) -> None:
    if config.check_member_id and state.id != user.id:
        raise MemberMismatchError(record_id=state.id, payload_id=user.id)


def member_from_payload(payload: MemberPayload) -> MemberState:
    """Build a fully populated record from a member payload."""
    return apply_member_update(None, payload)


def apply_member_update(
    state: MemberState | None,
    payload: MemberPayload,
    *,
    config: MergeConfig = _DEFAULT_CONFIG,
) -> MemberState:
    """Apply a membership update, creating the record when *state* is ``None``.

    Membership data is authoritative: roles, nick, username, discriminator
    and avatar are always overwritten. The join time is only patched when
    the payload carries one.
    """
    user = payload.user
    if state is None:
        state = MemberState(id=user.id, bot=user.bot)
    else:
        _check_target(state, user, config)

    joined_at = parse_timestamp(payload.joined_at)
    if joined_at is not None:
        state.joined_at = joined_at

    state.roles = tuple(payload.roles)
    state.nick = payload.nick

    state.username = user.username
    state.parse_avatar(user.avatar)
    state.discriminator = parse_discriminator(user.discriminator)

    state.member_set = True
    return state


def apply_presence_update(
    state: MemberState | None,
    payload: PresencePayload,
    *,
    config: MergeConfig = _DEFAULT_CONFIG,
) -> MemberState:
    """Apply a presence update.

    Raises
    ------
    UnknownMemberError
        *state* is ``None`` and ``config.allow_presence_create`` is off.
    MemberMismatchError
        The payload is for a different member than *state*.
    """
    user = payload.user
    if state is None:
        if not config.allow_presence_create:
            raise UnknownMemberError(user.id)
        _logger.debug("Creating member %s from presence update", user.id)
        state = MemberState(id=user.id, bot=user.bot)
    else:
        _check_target(state, user, config)

    state.presence_set = True

    main = select_main_activity(payload.activities)
    state.presence_activity = LightActivity.from_payload(main) if main is not None else None

    if presence_owns_nick(state):
        state.nick = payload.nick

    if should_patch(user.username):
        state.username = user.username

    if should_patch(user.discriminator):
        state.discriminator = parse_discriminator(user.discriminator)

    if should_patch(user.avatar):
        state.parse_avatar(user.avatar)

    if should_patch(payload.status):
        status = PresenceStatus.from_wire(payload.status)
        if status is None:
            _logger.debug("Ignoring unknown presence status %r for member %s", payload.status, state.id)
        else:
            state.presence_status = status

    return state
