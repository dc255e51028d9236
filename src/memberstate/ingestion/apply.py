"""Ingestion application helpers.

This module centralizes the common pattern used for both update streams:

- parse the raw gateway dict into a typed Pydantic payload model
- hand the payload to the matching merge in :mod:`memberstate.state.merge`

Field-level problems are handled by the merge (they degrade, never raise).
A dict that cannot form a payload at all (e.g. no ``user.id``) raises
:class:`~memberstate.exceptions.PayloadError`.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import ValidationError

from memberstate.config import MergeConfig
from memberstate.exceptions import PayloadError
from memberstate.models._base import GatewayModel
from memberstate.models.member import MemberState
from memberstate.models.payloads import MemberPayload, PresencePayload
from memberstate.state.merge import apply_member_update, apply_presence_update

_logger = logging.getLogger(__name__)

TModel = TypeVar("TModel", bound=GatewayModel)

_DEFAULT_CONFIG = MergeConfig()


def parse_payload(model_cls: type[TModel], raw: dict[str, Any]) -> TModel:
    """Validate *raw* into *model_cls*, wrapping validation failures."""
    try:
        return model_cls.model_validate(raw)
    except ValidationError as exc:
        raise PayloadError(f"invalid {model_cls.__name__}: {exc}", kind=model_cls.__name__) from exc


def apply_member_event(
    state: MemberState | None,
    raw: dict[str, Any],
    *,
    config: MergeConfig = _DEFAULT_CONFIG,
) -> MemberState:
    """Parse a raw member object and merge it into *state*."""
    payload = parse_payload(MemberPayload, raw)
    _logger.debug("Applying member update for %s (roles=%d)", payload.user.id, len(payload.roles))
    return apply_member_update(state, payload, config=config)


def apply_presence_event(
    state: MemberState | None,
    raw: dict[str, Any],
    *,
    config: MergeConfig = _DEFAULT_CONFIG,
) -> MemberState:
    """Parse a raw presence update and merge it into *state*."""
    payload = parse_payload(PresencePayload, raw)
    _logger.debug(
        "Applying presence update for %s (status=%r, activities=%d)",
        payload.user.id,
        payload.status,
        len(payload.activities),
    )
    return apply_presence_update(state, payload, config=config)
