from __future__ import annotations

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from streamchart.models import Chart

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "Failed to fetch data"
UNSUCCESSFUL_MESSAGE = "API returned unsuccessful response"
MALFORMED_MESSAGE = "API returned malformed chart data"

API_KEY_HEADER = "api-key"


class ChartFetchError(Exception):
    pass


class ChartFetcher:
    def __init__(
        self,
        api_url: str,
        api_key: str,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.api_url = api_url
        self.api_key = api_key
        self.timeout = timeout
        self._client = client

    async def fetch_chart(self) -> Chart:
        if self._client is not None:
            return await self._fetch(self._client)
        async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
            return await self._fetch(client)

    async def _fetch(self, client: httpx.AsyncClient) -> Chart:
        logger.info("Requesting chart from %s", self.api_url or "<unset API_URL>")
        try:
            response = await client.get(self.api_url, headers={API_KEY_HEADER: self.api_key})
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("Chart request to %s failed: %s", self.api_url, exc)
            raise ChartFetchError(FETCH_FAILED_MESSAGE) from exc

        try:
            payload: Any = response.json()
        except ValueError as exc:
            logger.warning("Chart response is not valid JSON: %s", exc)
            raise ChartFetchError(MALFORMED_MESSAGE) from exc

        if not isinstance(payload, dict) or not payload.get("success"):
            logger.warning("Chart API reported an unsuccessful response")
            raise ChartFetchError(UNSUCCESSFUL_MESSAGE)

        try:
            chart = Chart.model_validate(payload.get("chart"))
        except ValidationError as exc:
            logger.warning("Chart payload failed validation: %s", exc)
            raise ChartFetchError(MALFORMED_MESSAGE) from exc

        logger.info("Loaded %s songs for chart dated %s", len(chart.songs), chart.chart_date)
        return chart


__all__ = [
    "ChartFetchError",
    "ChartFetcher",
    "FETCH_FAILED_MESSAGE",
    "MALFORMED_MESSAGE",
    "UNSUCCESSFUL_MESSAGE",
]
