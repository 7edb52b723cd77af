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
"""StdlibLoggingAdapter — LoggingPort without structlog.

Selected with ``aspectlog.logging.adapter: stdlib``. Key/value fields are
folded into the message as ``event | key=value``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from aspectlog.logging.settings import LoggingSettings, set_logger_level

if TYPE_CHECKING:
    from aspectlog.core.config import Config

_CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_JSON_FORMAT = '{"timestamp":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}'


class _KeyValueLogger:
    """Accepts the ``logger.info(event, **fields)`` calls the application makes."""

    __slots__ = ("_logger",)

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    @property
    def name(self) -> str:
        return self._logger.name

    def _log(self, level: int, event: str, fields: dict[str, Any]) -> None:
        if fields:
            event = f"{event} | " + " ".join(f"{k}={v}" for k, v in fields.items())
        self._logger.log(level, event)

    def debug(self, event: str, **fields: Any) -> None:
        self._log(logging.DEBUG, event, fields)

    def info(self, event: str, **fields: Any) -> None:
        self._log(logging.INFO, event, fields)

    def warning(self, event: str, **fields: Any) -> None:
        self._log(logging.WARNING, event, fields)

    def error(self, event: str, **fields: Any) -> None:
        self._log(logging.ERROR, event, fields)


class StdlibLoggingAdapter:
    def __init__(self) -> None:
        self.settings = LoggingSettings()

    def configure(self, config: Config) -> None:
        self.settings = LoggingSettings.from_config(config)
        self.settings.install(_JSON_FORMAT if self.settings.is_json else _CONSOLE_FORMAT)

    def get_logger(self, name: str) -> Any:
        return _KeyValueLogger(logging.getLogger(name))

    def set_level(self, name: str, level: str) -> None:
        set_logger_level(name, level)
