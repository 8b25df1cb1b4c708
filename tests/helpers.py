from __future__ import annotations

from typing import Any, Dict, List

API_URL = "https://charts.example.test/top200"


def song_payload(
    rank: int,
    title: str,
    artists: List[str],
    play_count: int = 1_000,
    album_name: str = "",
) -> Dict[str, Any]:
    return {
        "rank": rank,
        "title": title,
        "artists": artists,
        "albumName": album_name,
        "coverArt": f"https://img.example.test/{rank}.jpg",
        "playCount": play_count,
    }
