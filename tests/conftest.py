from __future__ import annotations

from typing import Any

import pytest

AVATAR_HEX = "0123456789abcdef0123456789abcdef"


@pytest.fixture
def member_raw() -> dict[str, Any]:
    return {
        "user": {
            "id": "80351110224678912",
            "username": "Nelly",
            "discriminator": "1337",
            "avatar": "a_" + AVATAR_HEX,
            "bot": False,
        },
        "nick": "NOT API SUPPORT",
        "roles": ["41771983423143936", "41771983423143937"],
        "joined_at": "2015-04-26T06:26:56.936000+00:00",
    }


@pytest.fixture
def presence_raw() -> dict[str, Any]:
    return {
        "user": {"id": "80351110224678912"},
        "status": "online",
        "activities": [
            {"name": "Rocket League", "type": 0},
            {"name": "Twitch", "type": 1, "url": "https://twitch.tv/nelly", "details": "Ranked"},
        ],
    }
