"""Language code per connection slot."""

from __future__ import annotations

import threading


class ClientLocaleTracker:
    """Latest known language per connection slot.

    Slots are reused by the host after a disconnect, so an entry left behind
    is overwritten by the next locale query for that slot. ``remove`` lets the
    host evict eagerly when a client leaves.
    """

    def __init__(self) -> None:
        self._languages: dict[int, str] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._languages)

    def set(self, slot: int, language: str) -> None:
        with self._lock:
            self._languages[slot] = language

    def get(self, slot: int) -> str | None:
        return self._languages.get(slot)

    def remove(self, slot: int) -> str | None:
        with self._lock:
            return self._languages.pop(slot, None)


__all__ = ["ClientLocaleTracker"]
