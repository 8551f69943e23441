from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from ..config import Settings, get_settings
from ..errors import FetchError
from ..models.news import Category
from ..models.state import Failed, FetchState, Idle, Loading, Success
from .headlines import HeadlinesService

logger = logging.getLogger(__name__)

StateListener = Callable[[FetchState], None]
Sleep = Callable[[float], Awaitable[None]]


class FetchController:
    """Own the fetch lifecycle for the selected category.

    Each call to :meth:`start_sequence` issues a new sequence token. A sequence
    runs as its own task and retries failed attempts with exponential backoff.
    Only the sequence holding the current token may publish; results of a
    superseded sequence are dropped when they arrive.
    """

    def __init__(
        self,
        service: HeadlinesService,
        settings: Settings | None = None,
        *,
        sleep: Sleep | None = None,
    ) -> None:
        self._service = service
        self._settings = settings or get_settings()
        self._sleep = sleep or asyncio.sleep
        self._state: FetchState = Idle()
        self._token = 0
        self._listeners: list[StateListener] = []
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def max_attempts(self) -> int:
        return self._settings.fetch_max_attempts

    @property
    def state(self) -> FetchState:
        return self._state

    def get_state(self) -> FetchState:
        return self._state

    @property
    def current_sequence(self) -> int:
        return self._token

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def start_sequence(self, category: Category) -> None:
        """Supersede any running sequence and start fetching ``category``.

        ``Loading`` is published before this returns so stale articles are
        never shown under the new category.
        """
        category = Category(category)
        loop = asyncio.get_running_loop()
        self._token += 1
        token = self._token
        self._publish(token, Loading(category=category, sequence=token, attempt=1))
        task = loop.create_task(
            self._run_sequence(token, category),
            name=f"headlines-sequence-{token}",
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def backoff_delay(self, failed_attempt: int) -> float:
        return self._settings.fetch_backoff_base * 2 ** (failed_attempt - 1)

    async def drain(self) -> None:
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    async def _run_sequence(self, token: int, category: Category) -> None:
        attempt = 1
        while True:
            try:
                articles = await self._service.fetch_headlines(category)
            except FetchError as exc:
                logger.warning(
                    "Attempt %d/%d for %s failed: %s",
                    attempt,
                    self.max_attempts,
                    category.value,
                    exc,
                )
                if attempt >= self.max_attempts:
                    logger.error(
                        "Giving up on %s after %d attempts", category.value, attempt
                    )
                    self._publish(
                        token,
                        Failed(
                            category=category,
                            sequence=token,
                            message=(
                                f"Failed to load news after {attempt} attempts: {exc}"
                            ),
                        ),
                    )
                    return
                delay = self.backoff_delay(attempt)
                attempt += 1
                self._publish(
                    token, Loading(category=category, sequence=token, attempt=attempt)
                )
                await self._sleep(delay)
                continue

            logger.info(
                "Loaded %d articles for %s on attempt %d",
                len(articles),
                category.value,
                attempt,
            )
            self._publish(
                token, Success(category=category, sequence=token, articles=articles)
            )
            return

    def _publish(self, token: int, state: FetchState) -> bool:
        if token != self._token:
            logger.debug(
                "Dropping %s from superseded sequence %d (current %d)",
                state.status,
                token,
                self._token,
            )
            return False
        self._state = state
        for listener in list(self._listeners):
            listener(state)
        return True
