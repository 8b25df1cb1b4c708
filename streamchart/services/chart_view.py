from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from streamchart.services.chart_session import MODE_ERROR, MODE_LOADING, ViewState
from streamchart.services.formatters import format_date

PAGE_TITLE = "Top 200 Most Streamed Songs"
LOADING_LABEL = "Loading Top 200 Songs..."


@dataclass(frozen=True)
class ChartView:
    template: str
    status_code: int
    context: Dict[str, Any]


def build_view(state: ViewState) -> ChartView:
    """Pick the page for the active mode and the values it displays."""
    if state.mode == MODE_LOADING:
        return ChartView("loading.html", 200, {"mode": state.mode, "label": LOADING_LABEL})

    if state.mode == MODE_ERROR:
        return ChartView("error.html", 502, {"mode": state.mode, "error": state.error})

    return ChartView("chart.html", 200, {"mode": state.mode, **build_table(state)})


def build_table(state: ViewState) -> Dict[str, Any]:
    return {
        "page_title": PAGE_TITLE,
        "updated": format_date(state.chart_date),
        "search_query": state.search_query,
        "songs": state.filtered_songs,
        "total_count": len(state.songs),
    }


def status_payload(state: ViewState) -> Dict[str, Any]:
    return {
        "mode": state.mode,
        "songCount": len(state.songs),
        "chartDate": state.chart_date,
        "error": state.error,
    }


__all__ = [
    "ChartView",
    "LOADING_LABEL",
    "PAGE_TITLE",
    "build_table",
    "build_view",
    "status_payload",
]
