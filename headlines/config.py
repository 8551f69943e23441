from functools import lru_cache

from pydantic import Field, HttpUrl, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.news import Category


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="", extra="ignore", populate_by_name=True
    )

    http_timeout: float = Field(10.0, gt=0, alias="HTTP_TIMEOUT")
    http_max_connections: int = Field(20, ge=1, alias="HTTP_MAX_CONNECTIONS")
    http_max_keepalive: int = Field(10, ge=1, alias="HTTP_MAX_KEEPALIVE")
    http_user_agent: str = Field(
        "HeadlinesFeed/0.1 (+https://example.com; contact=admin@example.com)",
        alias="HTTP_USER_AGENT",
    )

    news_api_url: HttpUrl = Field(
        "https://newsapi.org/v2/top-headlines", alias="NEWS_API_URL"
    )
    news_api_key: SecretStr | None = Field(default=None, alias="NEWS_API_KEY")
    news_country: str = Field("us", min_length=2, max_length=2, alias="NEWS_COUNTRY")
    news_page_size: int = Field(24, ge=1, le=100, alias="NEWS_PAGE_SIZE")

    fetch_max_attempts: int = Field(3, ge=1, alias="FETCH_MAX_ATTEMPTS")
    fetch_backoff_base: float = Field(1.0, ge=0, alias="FETCH_BACKOFF_BASE")
    default_category: Category = Field(Category.GENERAL, alias="DEFAULT_CATEGORY")

    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(True, alias="LOG_JSON")


@lru_cache
def get_settings() -> Settings:
    return Settings()
