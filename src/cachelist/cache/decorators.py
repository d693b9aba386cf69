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
"""Declarative caching decorators."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from typing import Any, TypeVar

from cachelist.cache.base import AsyncBaseCache
from cachelist.cache.types import ABSENT, Duration

F = TypeVar("F", bound=Callable[..., Any])


def _resolve_key(func: Callable[..., Any], key: str | None, args: tuple, kwargs: dict) -> Any:
    bound = inspect.signature(func).bind(*args, **kwargs)
    bound.apply_defaults()
    if key is not None:
        return key.format(**bound.arguments)
    # Structured key; the cache hashes it into a storage key.
    return [f"{func.__module__}.{func.__qualname__}", dict(bound.arguments)]


def cacheable(
    cache: AsyncBaseCache,
    key: str | None = None,
    duration: Duration = 0,
) -> Callable[[F], F]:
    """Cache the return value of an async function, skipping execution on a hit.

    The `key` parameter supports format-string interpolation with function
    argument names, e.g. `key="user:{user_id}"`. When omitted, the function's
    qualified name and bound arguments form a structured key, so every
    argument must be JSON-serializable.

    A cached ``None`` counts as a hit.

    Args:
        cache: Cache to read and write.
        key: Key template with {param} placeholders.
        duration: Lifetime of cached entries, ``0`` for no expiry.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            resolved_key = _resolve_key(func, key, args, kwargs)

            cached = await cache.get(resolved_key)
            if cached is not ABSENT:
                return cached

            result = await func(*args, **kwargs)
            await cache.set(resolved_key, result, duration)
            return result

        return wrapper  # type: ignore[return-value]

    return decorator


def cache_put(
    cache: AsyncBaseCache,
    key: str,
    duration: Duration = 0,
) -> Callable[[F], F]:
    """Always execute the function and cache its result.

    Useful for update operations that should refresh the cached value
    stored by a :func:`cacheable` function using the same key template.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            result = await func(*args, **kwargs)
            await cache.set(_resolve_key(func, key, args, kwargs), result, duration)
            return result

        return wrapper  # type: ignore[return-value]

    return decorator


def cache_evict(
    cache: AsyncBaseCache,
    key: str = "",
    all_entries: bool = False,
) -> Callable[[F], F]:
    """Evict a cache entry (or all entries) after the function returns.

    Args:
        cache: Cache to evict from.
        key: Key template with {param} placeholders. Ignored when *all_entries* is ``True``.
        all_entries: When ``True``, flush the whole store after execution.
    """
    if not key and not all_entries:
        raise ValueError("cache_evict needs a key template unless all_entries is True")

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            result = await func(*args, **kwargs)
            if all_entries:
                await cache.flush()
            else:
                await cache.delete(_resolve_key(func, key, args, kwargs))
            return result

        return wrapper  # type: ignore[return-value]

    return decorator
