from __future__ import annotations

from typing import List, Sequence

from streamchart.models import Song


def filter_songs(songs: Sequence[Song], query: str) -> List[Song]:
    """Keep songs whose title or any artist contains ``query``, ignoring case.

    Chart order is preserved; an empty query keeps every song.
    """
    needle = query.casefold()
    if not needle:
        return list(songs)
    return [song for song in songs if _matches(song, needle)]


def _matches(song: Song, needle: str) -> bool:
    if needle in song.title.casefold():
        return True
    return any(needle in artist.casefold() for artist in song.artists)


__all__ = ["filter_songs"]
