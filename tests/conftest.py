from __future__ import annotations

from typing import Any, Dict

import pytest

from tests.helpers import song_payload


@pytest.fixture
def two_song_envelope() -> Dict[str, Any]:
    return {
        "success": True,
        "chart": {
            "chartDate": "2024-01-05",
            "songs": [
                song_payload(1, "Blinding Lights", ["The Weeknd"], 4_712_345_678, "After Hours"),
                song_payload(2, "Shape of You", ["Ed Sheeran"], 4_012_000_000, "Divide"),
            ],
        },
    }
