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
"""Exception hierarchy for cachelist.

Absence of a cached entry is never an exception (see ``ABSENT``), and a
backend refusing a write is reported as ``False``. Exceptions are reserved
for faults:

- InfrastructureException: the backend store could not complete a call
- SerializationException: a value could not be encoded or decoded
"""

from __future__ import annotations


class CacheListException(Exception):
    """Base exception for all cachelist errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "CACHE_DECODE").
        context: Arbitrary key-value pairs for debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


class InfrastructureException(CacheListException):
    """Failures of the storage infrastructure behind a cache."""


class CacheBackendException(InfrastructureException):
    """A backend primitive failed to complete (connectivity, store error)."""


class SerializationException(CacheListException, ValueError):
    """A value could not be encoded for, or decoded from, the backend."""
