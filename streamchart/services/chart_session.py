from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple

from streamchart.models import Chart, Song
from streamchart.services.chart_fetcher import FETCH_FAILED_MESSAGE, ChartFetcher, ChartFetchError
from streamchart.services.song_filter import filter_songs

logger = logging.getLogger(__name__)

MODE_LOADING = "loading"
MODE_ERROR = "error"
MODE_READY = "ready"


@dataclass(frozen=True)
class ViewState:
    songs: Tuple[Song, ...] = field(default_factory=tuple)
    chart_date: str = ""
    loading: bool = True
    error: Optional[str] = None
    search_query: str = ""

    @property
    def mode(self) -> str:
        if self.loading:
            return MODE_LOADING
        if self.error is not None:
            return MODE_ERROR
        return MODE_READY

    @property
    def filtered_songs(self) -> List[Song]:
        return filter_songs(self.songs, self.search_query)


def chart_loaded(state: ViewState, chart: Chart) -> ViewState:
    return replace(state, songs=tuple(chart.songs), chart_date=chart.chart_date)


def chart_failed(state: ViewState, message: str) -> ViewState:
    return replace(state, error=message)


def loading_finished(state: ViewState) -> ViewState:
    return replace(state, loading=False)


def with_query(state: ViewState, query: Optional[str]) -> ViewState:
    return replace(state, search_query=query or "")


class ChartSession:
    """Owns the view state and the single chart load for this process."""

    def __init__(self, fetcher: ChartFetcher) -> None:
        self._fetcher = fetcher
        self._state = ViewState()
        self._task: Optional[asyncio.Task] = None

    @property
    def state(self) -> ViewState:
        return self._state

    def start(self) -> asyncio.Task:
        if self._task is None:
            self._task = asyncio.create_task(self.load())
        return self._task

    async def load(self) -> None:
        try:
            chart = await self._fetcher.fetch_chart()
            self._state = chart_loaded(self._state, chart)
        except ChartFetchError as exc:
            self._state = chart_failed(self._state, str(exc))
        except Exception:
            logger.exception("Unexpected error while loading the chart")
            self._state = chart_failed(self._state, FETCH_FAILED_MESSAGE)
        finally:
            self._state = loading_finished(self._state)

    async def close(self) -> None:
        if self._task is None or self._task.done():
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            logger.info("Chart load cancelled before it settled")


__all__ = [
    "ChartSession",
    "MODE_ERROR",
    "MODE_LOADING",
    "MODE_READY",
    "ViewState",
    "chart_failed",
    "chart_loaded",
    "loading_finished",
    "with_query",
]
