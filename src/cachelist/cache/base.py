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
"""Asynchronous cache base class.

``AsyncBaseCache`` turns application keys into storage keys, encodes and
decodes values, and delegates to five primitive operations that concrete
backends implement. The batch primitives have default implementations built
on the single-key ones; backends with native batch support override them.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Hashable, Iterable, Mapping
from typing import Any, Self

from cachelist.cache.keys import build_storage_key
from cachelist.cache.serializer import JsonSerializer, Serializer
from cachelist.cache.types import ABSENT, Duration, to_seconds
from cachelist.config.properties.cache import CacheProperties
from cachelist.core.config import Config
from cachelist.kernel.exceptions import SerializationException

logger = logging.getLogger("cachelist.cache")


class AsyncBaseCache(ABC):
    """Base class for asynchronous caches.

    Args:
        key_prefix: String prepended to every storage key, so that several
            logical caches can share one physical store. Only alphanumeric
            characters are recommended.
        serialization: When ``True`` values are encoded with *serializer*
            on write and decoded on read. When ``False`` values are handed
            to the backend unchanged and must already be strings.
        serializer: Encoder used when *serialization* is on. Defaults to
            :class:`JsonSerializer`.
    """

    def __init__(
        self,
        key_prefix: str = "",
        serialization: bool = True,
        serializer: Serializer | None = None,
    ) -> None:
        self._key_prefix = key_prefix
        self._serialization = serialization
        self._serializer: Serializer = serializer if serializer is not None else JsonSerializer()

    @classmethod
    def from_config(cls, config: Config, **kwargs: Any) -> Self:
        """Create a cache configured from the ``cachelist.cache`` section.

        Extra keyword arguments are passed to the constructor and win over
        configured values.
        """
        props = config.bind(CacheProperties)
        kwargs.setdefault("key_prefix", props.key_prefix)
        kwargs.setdefault("serialization", props.serialization)
        return cls(**kwargs)

    @property
    def key_prefix(self) -> str:
        return self._key_prefix

    @property
    def serialization(self) -> bool:
        return self._serialization

    def build_key(self, key: Any) -> str:
        """Build the normalized storage key for *key*.

        A string of at most 32 characters is prefixed and returned as-is.
        Longer strings and non-string keys are replaced by the MD5 digest of
        their canonical text form.
        """
        return build_storage_key(key, self._key_prefix)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def get(self, key: Any) -> Any:
        """Retrieve a value from cache.

        Returns:
            The cached value, or :data:`ABSENT` if there is no entry or it
            has expired.
        """
        storage_key = self.build_key(key)
        raw = await self.get_value(storage_key)
        if raw is None:
            return ABSENT
        return self._decode(storage_key, raw)

    async def multi_get(self, keys: Iterable[Hashable]) -> dict[Any, Any]:
        """Retrieve several values at once.

        The result has exactly one entry per distinct key in *keys*, keyed by
        the original keys. Missing or expired entries map to :data:`ABSENT`.
        Keys that compare equal in Python (``1``, ``1.0``, ``True``) share
        one result entry, which holds the value of the first of them.
        """
        key_map: dict[Any, str] = {}
        for key in keys:
            if key not in key_map:
                key_map[key] = self.build_key(key)
        values = await self.get_values(list(dict.fromkeys(key_map.values())))

        results: dict[Any, Any] = {}
        for key, storage_key in key_map.items():
            raw = values.get(storage_key)
            results[key] = ABSENT if raw is None else self._decode(storage_key, raw)
        return results

    async def exists(self, key: Any) -> bool:
        """Check whether *key* has a live entry, without decoding it."""
        return await self.exists_value(self.build_key(key))

    async def set(self, key: Any, value: Any, duration: Duration = 0) -> bool:
        """Store a value, replacing any existing value and expiration.

        Args:
            key: Key identifying the value. May be any serializable value.
            value: The value to cache.
            duration: Seconds (or a ``timedelta``) until the entry expires.
                ``0`` means never expire.

        Returns:
            Whether the backend stored the value.
        """
        storage_key = self.build_key(key)
        return await self.set_value(storage_key, self._encode(storage_key, value), to_seconds(duration))

    async def multi_set(self, items: Mapping[Any, Any], duration: Duration = 0) -> list[str]:
        """Store several values sharing one duration.

        Returns:
            The *storage* keys whose write failed; empty on full success.
        """
        return await self.set_values(self._encode_items(items), to_seconds(duration))

    async def add(self, key: Any, value: Any, duration: Duration = 0) -> bool:
        """Store a value only if the cache does not already hold *key*.

        Returns:
            Whether the value was written. ``False`` when the key existed.
        """
        storage_key = self.build_key(key)
        return await self.add_value(storage_key, self._encode(storage_key, value), to_seconds(duration))

    async def multi_add(self, items: Mapping[Any, Any], duration: Duration = 0) -> list[str]:
        """Store several values, skipping keys the cache already holds.

        Returns:
            The *storage* keys that were not written; empty on full success.
        """
        return await self.add_values(self._encode_items(items), to_seconds(duration))

    async def delete(self, key: Any) -> bool:
        """Delete the entry for *key*."""
        return await self.delete_value(self.build_key(key))

    async def flush(self) -> bool:
        """Delete every entry in the backing store.

        This is not limited to :attr:`key_prefix`; other caches sharing the
        store lose their entries too.
        """
        return await self.flush_values()

    # ------------------------------------------------------------------
    # Required primitives
    # ------------------------------------------------------------------

    @abstractmethod
    async def get_value(self, key: str) -> str | None:
        """Return the stored text for *key*, or ``None`` if missing or expired."""

    @abstractmethod
    async def set_value(self, key: str, value: str, duration: int) -> bool:
        """Store *value* under *key* unconditionally."""

    @abstractmethod
    async def add_value(self, key: str, value: str, duration: int) -> bool:
        """Store *value* under *key* only if *key* holds nothing."""

    @abstractmethod
    async def delete_value(self, key: str) -> bool:
        """Delete *key* from the store."""

    @abstractmethod
    async def flush_values(self) -> bool:
        """Delete everything in the store."""

    # ------------------------------------------------------------------
    # Overridable batch primitives
    # ------------------------------------------------------------------

    async def get_values(self, keys: list[str]) -> dict[str, str]:
        """Return stored text for each present key; absent keys are omitted.

        The default issues one :meth:`get_value` per key. Faults propagate.
        """
        logger.debug("Batch get of %d key(s) via single-key reads", len(keys))
        results: dict[str, str] = {}
        for key in keys:
            value = await self.get_value(key)
            if value is not None:
                results[key] = value
        return results

    async def set_values(self, data: dict[str, str], duration: int) -> list[str]:
        """Store each entry of *data*; return the keys that failed.

        The default issues one :meth:`set_value` per entry concurrently.
        """
        return await self._write_each(self.set_value, data, duration)

    async def add_values(self, data: dict[str, str], duration: int) -> list[str]:
        """Add each entry of *data*; return the keys that were not written.

        The default issues one :meth:`add_value` per entry concurrently.
        """
        return await self._write_each(self.add_value, data, duration)

    async def exists_value(self, key: str) -> bool:
        """Report whether *key* is stored. The default performs a full read."""
        return await self.get_value(key) is not None

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    async def _write_each(
        self,
        write: Callable[[str, str, int], Awaitable[bool]],
        data: dict[str, str],
        duration: int,
    ) -> list[str]:
        keys = list(data)
        logger.debug("Batch %s of %d key(s) via single-key writes", write.__name__, len(keys))
        outcomes = await asyncio.gather(
            *(write(key, data[key], duration) for key in keys),
            return_exceptions=True,
        )

        failed: list[str] = []
        for key, outcome in zip(keys, outcomes):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    raise outcome
                logger.warning("Backend fault during %s of '%s': %s", write.__name__, key, outcome)
                failed.append(key)
            elif not outcome:
                failed.append(key)
        return failed

    def _encode_items(self, items: Mapping[Any, Any]) -> dict[str, str]:
        data: dict[str, str] = {}
        for key, value in items.items():
            storage_key = self.build_key(key)
            data[storage_key] = self._encode(storage_key, value)
        return data

    def _encode(self, storage_key: str, value: Any) -> Any:
        if not self._serialization:
            return value
        try:
            return self._serializer.dumps(value)
        except (TypeError, ValueError) as exc:
            raise SerializationException(
                f"Cannot encode value for cache key '{storage_key}': {exc}",
                code="CACHE_ENCODE",
                context={"key": storage_key},
            ) from exc

    def _decode(self, storage_key: str, raw: Any) -> Any:
        if not self._serialization:
            return raw
        try:
            return self._serializer.loads(raw)
        except (TypeError, ValueError) as exc:
            raise SerializationException(
                f"Cannot decode cached value for key '{storage_key}': {exc}",
                code="CACHE_DECODE",
                context={"key": storage_key},
            ) from exc
