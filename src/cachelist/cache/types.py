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
"""Shared cache types: the absence sentinel and entry durations."""

from __future__ import annotations

import math
from datetime import timedelta
from typing import Final, TypeAlias

Duration: TypeAlias = int | float | timedelta


class _Absent:
    """Type of :data:`ABSENT`. Only one instance ever exists."""

    _instance: _Absent | None = None

    def __new__(cls) -> _Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT: Final = _Absent()
"""Returned by reads when no entry exists or the entry has expired.

Distinct from every value a cache can hold, including ``None``, ``False``,
``0`` and ``""``. Compare with ``is``.
"""


def to_seconds(duration: Duration) -> int:
    """Normalize a duration to whole seconds. ``0`` means never expire.

    A positive fraction of a second rounds up, so a non-zero lifetime never
    becomes ``0``.
    """
    seconds = duration.total_seconds() if isinstance(duration, timedelta) else duration
    if seconds < 0:
        raise ValueError(f"Cache duration must not be negative, got {duration!r}")
    return math.ceil(seconds)
