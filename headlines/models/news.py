from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Category(str, Enum):
    GENERAL = "general"
    BUSINESS = "business"
    TECHNOLOGY = "technology"
    ENTERTAINMENT = "entertainment"
    HEALTH = "health"
    SCIENCE = "science"
    SPORTS = "sports"


class ArticleSource(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str | None = Field(default=None, description="Publisher identifier")
    name: str | None = Field(default=None, description="Publisher name")


class Article(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    source: ArticleSource = Field(default_factory=ArticleSource)
    author: str | None = Field(default=None, description="Byline if provided")
    title: str = Field(description="Article headline")
    description: str | None = Field(default=None, description="Short teaser or dek")
    url: str = Field(description="Canonical article URL")
    url_to_image: str | None = Field(
        default=None, alias="urlToImage", description="Lead image URL, may be broken"
    )
    published_at: str | None = Field(
        default=None, alias="publishedAt", description="Publication timestamp as sent"
    )
    content: str | None = Field(default=None, description="Truncated body excerpt")

    @field_validator("source", mode="before")
    @classmethod
    def _default_source(cls, value: object) -> object:
        return ArticleSource() if value is None else value

    @property
    def key(self) -> str:
        return self.url or self.title


class HeadlinesPayload(BaseModel):
    """Body of a ``top-headlines`` response."""

    status: str | None = None
    total_results: int | None = Field(default=None, alias="totalResults")
    articles: tuple[Article, ...] = ()
    code: str | None = None
    message: str | None = None

    @field_validator("articles", mode="before")
    @classmethod
    def _missing_articles(cls, value: object) -> object:
        return () if value is None else value
