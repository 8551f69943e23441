from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx
from pydantic import ValidationError

from ..config import Settings, get_settings
from ..errors import ConfigurationError, HttpError, ParseError, TransportError
from ..http_client import get_http_client
from ..models.news import Article, Category, HeadlinesPayload

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class HeadlinesService:
    """Single attempt against the ``top-headlines`` endpoint.

    Every failure is raised as a :class:`~headlines.errors.FetchError`
    subclass so the caller can decide whether to retry.
    """

    settings: Settings | None = None
    client: httpx.AsyncClient | None = None

    def __post_init__(self) -> None:
        if self.settings is None:
            self.settings = get_settings()
        if self.settings.news_api_key is None:
            raise ConfigurationError("NEWS_API_KEY is not configured")

    async def fetch_headlines(self, category: Category) -> tuple[Article, ...]:
        client = self.client or await get_http_client(self.settings)
        params = {
            "country": self.settings.news_country,
            "category": Category(category).value,
            "pageSize": self.settings.news_page_size,
        }
        headers = {"X-Api-Key": self.settings.news_api_key.get_secret_value()}
        try:
            response = await client.get(
                str(self.settings.news_api_url), params=params, headers=headers
            )
        except httpx.HTTPError as exc:
            raise TransportError(f"{type(exc).__name__}: {exc}") from exc

        if not response.is_success:
            raise HttpError(response.status_code, _remote_message(response))

        payload = _decode(response)
        if payload.status is not None and payload.status != "ok":
            raise HttpError(response.status_code, payload.message or payload.code)

        logger.debug(
            "Fetched %d articles for %s", len(payload.articles), params["category"]
        )
        return payload.articles


def _decode(response: httpx.Response) -> HeadlinesPayload:
    try:
        body: Any = response.json()
    except ValueError as exc:
        raise ParseError(f"response body is not JSON ({exc})") from exc
    if not isinstance(body, dict):
        raise ParseError(f"expected a JSON object, got {type(body).__name__}")
    try:
        return HeadlinesPayload.model_validate(body)
    except ValidationError as exc:
        raise ParseError(
            f"unexpected payload shape ({exc.error_count()} validation errors)"
        ) from exc


def _remote_message(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
    return None
