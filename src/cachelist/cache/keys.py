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
"""Cache key normalization.

Short string keys are used as-is. Anything else is rendered to a canonical
JSON text and replaced by its MD5 hex digest, so that every storage key is a
compact string regardless of the shape of the key the application used.
"""

from __future__ import annotations

import dataclasses
import hashlib
import json
from typing import Any

MAX_PLAIN_KEY_LENGTH = 32
_MAPPING_TAG = "__map__"


def _prepare(obj: Any) -> Any:
    if isinstance(obj, dict):
        if all(isinstance(k, str) for k in obj):
            return {k: _prepare(v) for k, v in obj.items()}
        # JSON would stringify these keys, merging 1 with "1".
        pairs = [[_prepare(k), _prepare(v)] for k, v in obj.items()]
        return {_MAPPING_TAG: sorted(pairs, key=lambda pair: canonicalize(pair[0]))}
    if isinstance(obj, (list, tuple)):
        return [_prepare(item) for item in obj]
    if isinstance(obj, (set, frozenset)):
        return sorted((_prepare(item) for item in obj), key=canonicalize)
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return _prepare(dataclasses.asdict(obj))
    if obj is None or isinstance(obj, (str, int, float)):
        return obj
    raise TypeError(f"Cache key component of type {type(obj).__name__} is not serializable")


def canonicalize(key: Any) -> str:
    """Render *key* as canonical JSON text.

    Object members are sorted and separators are compact, so structurally
    equal keys always produce the same text. Tuples encode as lists, sets
    as sorted lists. A dict with any non-string member key is encoded as a
    sorted list of ``[key, value]`` pairs, so ``{1: "x"}`` and ``{"1": "x"}``
    stay distinct and mixed key types can still be ordered.
    """
    return json.dumps(_prepare(key), sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def hash_text(text: str) -> str:
    """Return the 32-character hex MD5 digest of *text*."""
    return hashlib.md5(text.encode("utf-8"), usedforsecurity=False).hexdigest()


def build_storage_key(key: Any, prefix: str = "") -> str:
    """Build the normalized storage key for *key* under *prefix*."""
    if isinstance(key, str):
        body = key if len(key) <= MAX_PLAIN_KEY_LENGTH else hash_text(key)
    else:
        body = hash_text(canonicalize(key))
    return prefix + body
