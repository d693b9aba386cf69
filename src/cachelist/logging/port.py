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
"""LoggingPort: how cachelist expects its log output to be wired.

Library modules never configure logging themselves. They log through plain
stdlib loggers under the ``cachelist`` namespace (``cachelist.cache`` for the
cache base class), so an implementation must route stdlib ``logging`` records
to its output, not only records from loggers it hands out.

Configuration comes from the ``cachelist.logging`` section::

    cachelist:
      logging:
        format: console        # or json
        level:
          root: INFO
          cachelist.cache: DEBUG
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from cachelist.core.config import Config


@runtime_checkable
class LoggingPort(Protocol):
    """Logging contract for cachelist applications.

    ``configure`` reads ``cachelist.logging.format`` and the
    ``cachelist.logging.level`` section, where ``root`` sets the root logger
    level and every other entry names a stdlib logger. ``set_level`` takes a
    stdlib logger name such as ``cachelist.cache`` and a level name.
    ``get_logger`` returns an application-facing logger of the
    implementation's choosing.
    """

    def configure(self, config: Config) -> None: ...
    def get_logger(self, name: str) -> Any: ...
    def set_level(self, name: str, level: str) -> None: ...
