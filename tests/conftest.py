from __future__ import annotations

import asyncio
from collections.abc import Iterable

import pytest

from headlines.config import Settings
from headlines.models import Article, Category


def make_article(title: str, url: str | None = None, source: str | None = "S") -> Article:
    return Article.model_validate(
        {
            "source": {"id": None, "name": source},
            "title": title,
            "url": url or f"https://news.example/{title.lower()}",
            "publishedAt": "2024-05-20T12:34:00Z",
        }
    )


class StubService:
    """Scripted stand-in for ``HeadlinesService``.

    Each category maps to a list of outcomes consumed one per call: an
    exception instance is raised, anything else is returned as articles.
    """

    def __init__(
        self,
        script: dict[Category, Iterable[object]] | None = None,
        gate: asyncio.Event | None = None,
    ) -> None:
        self.script = {key: list(value) for key, value in (script or {}).items()}
        self.gate = gate
        self.calls: list[Category] = []

    async def fetch_headlines(self, category: Category) -> tuple[Article, ...]:
        self.calls.append(category)
        if self.gate is not None:
            await self.gate.wait()
        outcomes = self.script.get(category)
        outcome = outcomes.pop(0) if outcomes else ()
        if isinstance(outcome, BaseException):
            raise outcome
        return tuple(outcome)


@pytest.fixture
def settings() -> Settings:
    return Settings(news_api_key="test-key", fetch_backoff_base=1.0)


@pytest.fixture
def stub_service():
    return StubService
