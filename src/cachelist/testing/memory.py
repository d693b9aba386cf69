# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""In-memory reference backend for tests and local development."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any

from cachelist.cache.base import AsyncBaseCache


class InMemoryCache(AsyncBaseCache):
    """Dict-backed cache implementing only the required primitives.

    Expiry is checked lazily on access against *clock*, which defaults to
    :func:`time.monotonic`. Batch operations use the :class:`AsyncBaseCache`
    defaults.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._clock = clock
        self._store: dict[str, tuple[str, float | None]] = {}

    def __len__(self) -> int:
        return len(self._store)

    def _live_entry(self, key: str) -> tuple[str, float | None] | None:
        entry = self._store.get(key)
        if entry is None:
            return None
        _, expires_at = entry
        if expires_at is not None and self._clock() >= expires_at:
            del self._store[key]
            return None
        return entry

    async def get_value(self, key: str) -> str | None:
        entry = self._live_entry(key)
        return None if entry is None else entry[0]

    async def set_value(self, key: str, value: str, duration: int) -> bool:
        expires_at = self._clock() + duration if duration > 0 else None
        self._store[key] = (value, expires_at)
        return True

    async def add_value(self, key: str, value: str, duration: int) -> bool:
        if self._live_entry(key) is not None:
            return False
        return await self.set_value(key, value, duration)

    async def delete_value(self, key: str) -> bool:
        """Remove a key. Returns True if a live entry existed."""
        existed = self._live_entry(key) is not None
        self._store.pop(key, None)
        return existed

    async def flush_values(self) -> bool:
        self._store.clear()
        return True
