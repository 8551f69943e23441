"""HTTP surface for the headlines feed.

The app holds one process-wide feed, so every client shares a single
selection. Sequence tasks run on the server event loop and expect a
long-running ASGI process; behind ``Mangum`` pending retries only advance
while a later invocation keeps the loop alive.
"""

from __future__ import annotations

from fastapi import Depends, FastAPI
from fastapi.responses import ORJSONResponse
from mangum import Mangum
from pydantic import BaseModel

from headlines.config import get_settings
from headlines.feed import HeadlinesFeed
from headlines.http_client import shutdown_http_client
from headlines.logging_config import setup_logging
from headlines.models import Category, FetchState
from headlines.services import HeadlinesService
from headlines.views import render

app = FastAPI(
    title="Headlines Feed API",
    version="0.1.0",
    description=(
        "Top headlines per category with bounded retries, built for serverless deployment."
    ),
    default_response_class=ORJSONResponse,
)

_feed: HeadlinesFeed | None = None


class FeedSnapshot(BaseModel):
    category: Category
    state: FetchState


class CategoryListing(BaseModel):
    selected: Category
    categories: list[Category]


async def get_feed() -> HeadlinesFeed:
    global _feed

    if _feed is None:
        settings = get_settings()
        _feed = HeadlinesFeed(HeadlinesService(settings=settings), settings)
    _feed.start()
    return _feed


def snapshot(feed: HeadlinesFeed) -> FeedSnapshot:
    return FeedSnapshot(category=feed.category, state=feed.state)


@app.get("/health", tags=["system"])
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/categories", tags=["feed"], response_model=CategoryListing)
async def categories(feed: HeadlinesFeed = Depends(get_feed)):
    return CategoryListing(selected=feed.category, categories=list(Category))


@app.get("/feed", tags=["feed"], response_model=FeedSnapshot)
async def feed_state(feed: HeadlinesFeed = Depends(get_feed)):
    return snapshot(feed)


@app.get("/feed/view", tags=["feed"])
async def feed_view(feed: HeadlinesFeed = Depends(get_feed)):
    return render(feed.state)


@app.put("/feed/category/{category}", tags=["feed"], response_model=FeedSnapshot)
async def select_category(
    category: Category,
    feed: HeadlinesFeed = Depends(get_feed),
):
    feed.select(category)
    return snapshot(feed)


@app.post("/feed/refresh", tags=["feed"], response_model=FeedSnapshot)
async def refresh(feed: HeadlinesFeed = Depends(get_feed)):
    feed.refresh()
    return snapshot(feed)


@app.on_event("startup")
async def on_startup() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, json_output=settings.log_json)


@app.on_event("shutdown")
async def on_shutdown() -> None:
    if _feed is not None:
        await _feed.drain()
    await shutdown_http_client()


handler = Mangum(app)
