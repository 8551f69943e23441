"""Renderer contract: one panel per shape of :data:`FetchState`."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Literal, Union

from bs4 import BeautifulSoup
from dateutil import parser as date_parser
from pydantic import BaseModel, Field

from .models.news import Article
from .models.state import Failed, FetchState, Idle, Loading, Success

PLACEHOLDER_IMAGE_URL = "https://placehold.co/600x400/94a3b8/e2e8f0?text=Image+Missing"
UNKNOWN_SOURCE = "Unknown Source"
NO_SUMMARY = "No summary available for this article."


class ArticleCard(BaseModel):
    key: str
    source: str
    title: str
    url: str
    image_url: str
    summary: str
    author: str | None = None
    published_at: datetime | None = None


class LoadingView(BaseModel):
    kind: Literal["loading"] = "loading"
    attempt: int = 1
    headline: str = "Fetching the latest headlines..."
    detail: str = "This may take a moment."


class ErrorView(BaseModel):
    kind: Literal["error"] = "error"
    headline: str = "Error Fetching News"
    message: str
    hint: str = "Please try refreshing or selecting another category."


class EmptyView(BaseModel):
    kind: Literal["empty"] = "empty"
    headline: str
    hint: str = (
        "Try selecting a different category or wait for new headlines to be published."
    )


class GridView(BaseModel):
    kind: Literal["grid"] = "grid"
    cards: list[ArticleCard] = Field(default_factory=list)


View = Annotated[
    Union[LoadingView, ErrorView, EmptyView, GridView], Field(discriminator="kind")
]


def render(state: FetchState) -> View:
    if isinstance(state, Idle):
        return LoadingView()
    if isinstance(state, Loading):
        return LoadingView(attempt=state.attempt)
    if isinstance(state, Failed):
        return ErrorView(message=state.message)
    if isinstance(state, Success):
        if state.is_empty:
            label = state.category.value.upper()
            return EmptyView(headline=f'No articles found in the "{label}" category.')
        return GridView(cards=[build_card(article) for article in state.articles])
    raise TypeError(f"Unsupported state: {state!r}")


def build_card(article: Article) -> ArticleCard:
    return ArticleCard(
        key=article.key,
        source=article.source.name or UNKNOWN_SOURCE,
        title=article.title,
        url=article.url,
        image_url=article.url_to_image or PLACEHOLDER_IMAGE_URL,
        summary=_strip_html(article.description) or NO_SUMMARY,
        author=article.author,
        published_at=_parse_datetime(article.published_at),
    )


def _strip_html(value: str | None) -> str | None:
    if not value:
        return None
    if "<" not in value:
        return value.strip() or None
    text = BeautifulSoup(value, "lxml").get_text(" ", strip=True)
    return text or None


def _parse_datetime(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        parsed = date_parser.parse(value)
    except (ValueError, TypeError, OverflowError):
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)
