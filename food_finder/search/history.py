from __future__ import annotations

from collections.abc import Iterable

MAX_RECENT_SEARCHES = 5


class RecentSearchHistory:
    """Most-recent-first list of submitted search terms, case-insensitively unique."""

    def __init__(self, items: Iterable[str] | None = None, limit: int = MAX_RECENT_SEARCHES) -> None:
        self.limit = limit
        self._items: list[str] = [str(i) for i in (items or []) if i][:limit]

    @property
    def items(self) -> list[str]:
        return list(self._items)

    def record(self, term: str) -> None:
        if not term:
            return
        lowered = term.lower()
        self._items = [item for item in self._items if item.lower() != lowered]
        self._items.insert(0, term)
        del self._items[self.limit:]

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self._items)
