"""Memoization of working-day counts for the current month and year."""

import threading
from collections.abc import Callable
from dataclasses import dataclass, field

from loguru import logger

from clockedin.models import Scope


@dataclass
class _PeriodEntry:
    """Cached counts for a single period."""

    key: str = ""
    total: int | None = None
    until: dict[int, int] = field(default_factory=dict)


class WorkingDaysCache:
    """
    Single-entry-per-scope cache for working-day counts.

    Each scope (month, year) remembers one period key. A query for another
    key drops the whole entry before the new value is stored, so stale
    periods never leak into the current one. Lookups and stores run under
    a lock so the key, total and elapsed mapping always change together.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: dict[Scope, _PeriodEntry] = {scope: _PeriodEntry() for scope in Scope}

    def _entry_for(self, scope: Scope, key: str) -> _PeriodEntry:
        """Get the entry for a scope, resetting it when the key changed. Caller holds the lock."""
        entry = self._entries[scope]
        if entry.key != key:
            if entry.key:
                logger.debug(f"Working days cache for {scope.value} moved {entry.key} -> {key}")
            entry = _PeriodEntry(key=key)
            self._entries[scope] = entry
        return entry

    def total(self, scope: Scope, key: str, compute: Callable[[], int]) -> int:
        """Get the total working days for a period, computing it on a miss."""
        with self._lock:
            entry = self._entry_for(scope, key)
            if entry.total is None:
                logger.debug(f"Working days cache miss: total for {key}")
                entry.total = compute()
            return entry.total

    def until(self, scope: Scope, key: str, index: int, compute: Callable[[], int]) -> int:
        """Get the working days elapsed up to a day index, computing it on a miss."""
        with self._lock:
            entry = self._entry_for(scope, key)
            if index not in entry.until:
                logger.debug(f"Working days cache miss: day {index} of {key}")
                entry.until[index] = compute()
            return entry.until[index]

    def current_key(self, scope: Scope) -> str:
        """The period key currently held for a scope, or an empty string."""
        with self._lock:
            return self._entries[scope].key

    def clear(self) -> None:
        """Forget every cached period."""
        with self._lock:
            self._entries = {scope: _PeriodEntry() for scope in Scope}


WORKING_DAYS_CACHE = WorkingDaysCache()
