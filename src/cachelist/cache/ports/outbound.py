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
"""Cache store protocol: the primitive operations a backend provides."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CacheStore(Protocol):
    """Primitive storage contract.

    Keys are already normalized storage keys and values are already encoded
    text; a store never sees the application's key shapes or value types.
    ``get_value`` returns ``None`` for a missing or expired entry. ``""`` is
    a legitimate stored value. ``duration`` is in seconds, ``0`` meaning the
    entry never expires.
    """

    async def get_value(self, key: str) -> str | None: ...

    async def set_value(self, key: str, value: str, duration: int) -> bool: ...

    async def add_value(self, key: str, value: str, duration: int) -> bool: ...

    async def delete_value(self, key: str) -> bool: ...

    async def flush_values(self) -> bool: ...
