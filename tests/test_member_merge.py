from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

import pytest

from memberstate._constants import ZERO_AVATAR
from memberstate.config import MergeConfig
from memberstate.exceptions import MemberMismatchError
from memberstate.models.member import MemberState
from memberstate.models.payloads import MemberPayload, UserPayload
from memberstate.state.merge import apply_member_update, member_from_payload

AVATAR_HEX = "0123456789abcdef0123456789abcdef"


def _member(**overrides: Any) -> MemberPayload:
    user = overrides.pop("user", None) or UserPayload(id=1, username="bob", discriminator="0042", avatar=AVATAR_HEX)
    return MemberPayload(user=user, **overrides)


def test_creates_record_when_missing(member_raw: dict[str, Any]) -> None:
    state = apply_member_update(None, MemberPayload.model_validate(member_raw))

    assert state.id == 80351110224678912
    assert state.bot is False
    assert state.member_set is True
    assert state.presence_set is False
    assert state.nick == "NOT API SUPPORT"
    assert state.roles == (41771983423143936, 41771983423143937)
    assert state.username == "Nelly"
    assert state.discriminator == 1337
    assert state.avatar == bytes.fromhex(AVATAR_HEX)
    assert state.animated_avatar is True
    assert state.joined_at == datetime(2015, 4, 26, 6, 26, 56, 936000, tzinfo=UTC)


def test_member_from_payload_matches_update(member_raw: dict[str, Any]) -> None:
    payload = MemberPayload.model_validate(member_raw)
    assert member_from_payload(payload) == apply_member_update(None, payload)


def test_bot_flag_taken_at_creation() -> None:
    state = apply_member_update(None, _member(user=UserPayload(id=1, bot=True)))
    assert state.bot is True


def test_updates_in_place() -> None:
    state = MemberState(id=1)
    assert apply_member_update(state, _member()) is state


def test_roles_replaced_not_merged() -> None:
    state = apply_member_update(None, _member(roles=[1, 2, 3]))
    apply_member_update(state, _member(roles=[5]))

    assert state.roles == (5,)


def test_roles_stored_as_tuple() -> None:
    roles = [1, 2]
    state = apply_member_update(None, _member(roles=roles))
    roles.append(3)

    assert state.roles == (1, 2)


def test_nick_overwritten_unconditionally() -> None:
    state = apply_member_update(None, _member(nick="Bar"))
    apply_member_update(state, _member(nick=""))

    assert state.nick == ""


def test_profile_fields_overwritten_unconditionally() -> None:
    state = apply_member_update(None, _member())
    apply_member_update(state, _member(user=UserPayload(id=1)))

    assert state.username == ""
    assert state.discriminator == 0
    assert state.avatar == ZERO_AVATAR
    assert state.animated_avatar is False


def test_empty_join_time_keeps_previous() -> None:
    state = apply_member_update(None, _member(joined_at="2021-01-02T03:04:05+00:00"))
    apply_member_update(state, _member(joined_at=""))

    assert state.joined_at == datetime(2021, 1, 2, 3, 4, 5, tzinfo=UTC)


def test_unparseable_join_time_keeps_previous() -> None:
    state = apply_member_update(None, _member(joined_at="2021-01-02T03:04:05+00:00"))
    apply_member_update(state, _member(joined_at="not a timestamp"))

    assert state.joined_at == datetime(2021, 1, 2, 3, 4, 5, tzinfo=UTC)


def test_unparseable_join_time_on_new_record_stays_unknown() -> None:
    state = apply_member_update(None, _member(joined_at="garbage"))
    assert state.joined_at is None


def test_malformed_fields_degrade_without_error() -> None:
    user = UserPayload(id=1, username="bob", discriminator="#12", avatar="zz")
    state = apply_member_update(None, _member(user=user, roles=[9]))

    assert state.discriminator == 0
    assert state.avatar == ZERO_AVATAR
    assert state.roles == (9,)
    assert state.member_set is True


def test_presence_fields_untouched() -> None:
    state = MemberState(id=1, presence_set=True)
    apply_member_update(state, _member())

    assert state.presence_set is True
    assert state.presence_activity is None


def test_mismatched_id_rejected() -> None:
    state = MemberState(id=2)
    with pytest.raises(MemberMismatchError) as excinfo:
        apply_member_update(state, _member())

    assert excinfo.value.record_id == 2
    assert excinfo.value.payload_id == 1
    assert state.member_set is False


def test_mismatched_id_allowed_when_check_disabled() -> None:
    state = MemberState(id=2)
    apply_member_update(state, _member(nick="Bar"), config=MergeConfig(check_member_id=False))

    assert state.id == 2
    assert state.nick == "Bar"
