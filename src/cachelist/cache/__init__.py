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
"""cachelist cache: backend-agnostic asynchronous cache abstraction."""

from cachelist.cache.base import AsyncBaseCache
from cachelist.cache.decorators import cache_evict, cache_put, cacheable
from cachelist.cache.keys import build_storage_key
from cachelist.cache.ports.outbound import CacheStore
from cachelist.cache.serializer import JsonSerializer, Serializer
from cachelist.cache.types import ABSENT, Duration

__all__ = [
    "ABSENT",
    "AsyncBaseCache",
    "CacheStore",
    "Duration",
    "JsonSerializer",
    "Serializer",
    "build_storage_key",
    "cache_evict",
    "cache_put",
    "cacheable",
]
