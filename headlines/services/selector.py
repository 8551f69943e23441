from __future__ import annotations

from collections.abc import Callable

from ..models.news import Category

SelectionListener = Callable[[Category], None]


class CategorySelector:
    """Currently selected category plus synchronous change notification."""

    def __init__(self, initial: Category = Category.GENERAL) -> None:
        self._current = Category(initial)
        self._listeners: list[SelectionListener] = []

    @property
    def current(self) -> Category:
        return self._current

    def subscribe(self, listener: SelectionListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def select(self, category: Category | str) -> bool:
        """Select ``category``; returns ``False`` when it was already active.

        Raises ``ValueError`` for values outside :class:`Category`.
        """
        category = Category(category)
        if category is self._current:
            return False
        self._current = category
        for listener in list(self._listeners):
            listener(category)
        return True
