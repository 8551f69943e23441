from .controller import FetchController
from .headlines import HeadlinesService
from .selector import CategorySelector

__all__ = ["CategorySelector", "FetchController", "HeadlinesService"]
