"""Category-driven headlines feed backed by NewsAPI ``top-headlines``."""

from .feed import HeadlinesFeed
from .models import Article, Category, Failed, FetchState, Idle, Loading, Success
from .services import CategorySelector, FetchController, HeadlinesService

__all__ = [
    "Article",
    "Category",
    "CategorySelector",
    "Failed",
    "FetchController",
    "FetchState",
    "HeadlinesFeed",
    "HeadlinesService",
    "Idle",
    "Loading",
    "Success",
]
