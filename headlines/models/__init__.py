from .news import Article, ArticleSource, Category, HeadlinesPayload
from .state import Failed, FetchState, Idle, Loading, Success

__all__ = [
    "Article",
    "ArticleSource",
    "Category",
    "Failed",
    "FetchState",
    "HeadlinesPayload",
    "Idle",
    "Loading",
    "Success",
]
