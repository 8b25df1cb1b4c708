import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse, Response
from fastapi.templating import Jinja2Templates

from streamchart.config import settings
from streamchart.services.chart_fetcher import ChartFetcher
from streamchart.services.chart_session import MODE_READY, ChartSession, with_query
from streamchart.services.chart_view import build_table, build_view, status_payload
from streamchart.services.formatters import format_full_number, format_streams

LOG_DIR = Path("logs")
LOG_DIR.mkdir(parents=True, exist_ok=True)
LOG_FILE = LOG_DIR / "streamchart.log"

root_logger = logging.getLogger()
root_logger.handlers.clear()
root_logger.setLevel(logging.DEBUG)

console_handler = logging.StreamHandler()
console_handler.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
console_handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))

file_handler = logging.FileHandler(LOG_FILE, encoding="utf-8")
file_handler.setLevel(logging.DEBUG)
file_handler.setFormatter(
    logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
)

root_logger.addHandler(console_handler)
root_logger.addHandler(file_handler)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not settings.api_url:
        logger.warning("API_URL is not configured; the chart request will fail")
    session = ChartSession(
        ChartFetcher(
            api_url=settings.api_url,
            api_key=settings.api_key,
            timeout=settings.request_timeout,
        )
    )
    app.state.chart_session = session
    session.start()
    logger.info("Chart load started")
    yield
    await session.close()


app = FastAPI(title="Top 200 Most Streamed Songs", lifespan=lifespan)
templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
templates.env.filters["streams"] = format_streams
templates.env.filters["full_number"] = format_full_number


def _session(request: Request) -> ChartSession:
    return request.app.state.chart_session


@app.get("/", response_class=HTMLResponse)
async def index(request: Request, q: Optional[str] = None) -> HTMLResponse:
    state = with_query(_session(request).state, q)
    view = build_view(state)
    if view.status_code != 200:
        logger.debug("Rendering %s page: %s", state.mode, state.error)
    return templates.TemplateResponse(
        request,
        view.template,
        view.context,
        status_code=view.status_code,
    )


@app.get("/songs", response_class=HTMLResponse)
async def song_rows(request: Request, q: Optional[str] = None) -> Response:
    state = with_query(_session(request).state, q)
    if state.mode != MODE_READY:
        return JSONResponse(status_payload(state), status_code=409)
    return templates.TemplateResponse(request, "_songs_table.html", build_table(state))


@app.get("/status")
async def status(request: Request) -> JSONResponse:
    return JSONResponse(status_payload(_session(request).state))


@app.get("/health")
async def health_check() -> JSONResponse:
    return JSONResponse({"status": "ok"})


def run() -> None:
    uvicorn.run("streamchart.main:app", host="0.0.0.0", port=settings.app_port)
