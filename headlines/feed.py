from __future__ import annotations

from .config import Settings, get_settings
from .models.news import Category
from .models.state import FetchState
from .services.controller import FetchController, Sleep
from .services.headlines import HeadlinesService
from .services.selector import CategorySelector


class HeadlinesFeed:
    """Selector and controller wired together.

    A distinct selection starts a new sequence; re-selecting the active
    category does nothing. :meth:`refresh` restarts the active category.
    """

    def __init__(
        self,
        service: HeadlinesService,
        settings: Settings | None = None,
        *,
        sleep: Sleep | None = None,
    ) -> None:
        settings = settings or get_settings()
        self.selector = CategorySelector(settings.default_category)
        self.controller = FetchController(service, settings, sleep=sleep)
        self.selector.subscribe(self.controller.start_sequence)
        self._started = False

    @property
    def category(self) -> Category:
        return self.selector.current

    @property
    def state(self) -> FetchState:
        return self.controller.get_state()

    @property
    def started(self) -> bool:
        return self._started

    def start(self) -> None:
        if self._started:
            return
        self._started = True
        self.controller.start_sequence(self.selector.current)

    def select(self, category: Category | str) -> bool:
        if not self._started:
            self._started = True
            if not self.selector.select(category):
                self.controller.start_sequence(self.selector.current)
            return True
        return self.selector.select(category)

    def refresh(self) -> None:
        self._started = True
        self.controller.start_sequence(self.selector.current)

    async def drain(self) -> None:
        await self.controller.drain()
