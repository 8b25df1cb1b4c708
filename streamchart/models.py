from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Song(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    rank: int
    title: str
    artists: List[str]
    album_name: str = Field(default="", alias="albumName")
    cover_art: str = Field(default="", alias="coverArt")
    play_count: int = Field(alias="playCount", ge=0)

    @property
    def artist_names(self) -> str:
        return ", ".join(self.artists)


class Chart(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    chart_date: str = Field(alias="chartDate")
    songs: List[Song]


__all__ = [
    "Chart",
    "Song",
]
