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
"""Application bootstrap — configuration, logging, and context startup."""

from __future__ import annotations

import time
from pathlib import Path
from typing import TYPE_CHECKING

from aspectlog.container.exceptions import BeanCreationException
from aspectlog.core.config import Config
from aspectlog.core.exceptions import ConfigurationException
from aspectlog.logging.port import LoggingPort
from aspectlog.logging.stdlib_adapter import StdlibLoggingAdapter
from aspectlog.logging.structlog_adapter import StructlogAdapter

if TYPE_CHECKING:
    from aspectlog.context.application_context import ApplicationContext

DEFAULT_CONFIG_FILE = "aspectlog.yaml"

_LOGGING_ADAPTERS: dict[str, type] = {
    "structlog": StructlogAdapter,
    "stdlib": StdlibLoggingAdapter,
}


def create_logging_adapter(config: Config) -> LoggingPort:
    """Instantiate the adapter named by ``aspectlog.logging.adapter``."""
    name = str(config.get("aspectlog.logging.adapter", "structlog")).lower()
    adapter_cls = _LOGGING_ADAPTERS.get(name)
    if adapter_cls is None:
        raise ConfigurationException(
            "aspectlog.logging.adapter",
            name,
            f"expected one of {sorted(_LOGGING_ADAPTERS)}",
        )
    return adapter_cls()


class AspectLogApplication:
    """Bootstraps configuration, logging, and the ApplicationContext.

    Startup sequence:
    1. Load configuration (``aspectlog.yaml`` in the working directory,
       merged over the packaged defaults) unless a Config is given
    2. Create and configure the logging adapter
    3. Create the ApplicationContext with that adapter
    4. ``start()`` builds the beans and weaves aspects

    Startup details are logged at DEBUG so that the INFO output belongs
    to the application.
    """

    def __init__(self, config: Config | None = None, config_path: str | Path | None = None) -> None:
        self.config = config or Config.from_file(config_path or DEFAULT_CONFIG_FILE)

        self._logging = create_logging_adapter(self.config)
        self._logging.configure(self.config)
        self._logger = self._logging.get_logger("aspectlog.core")
        self._startup_time: float = 0.0

        # Deferred import to avoid circular import
        from aspectlog.context.application_context import ApplicationContext

        self._context = ApplicationContext(self.config, logging_port=self._logging)

    @property
    def context(self) -> ApplicationContext:
        return self._context

    @property
    def logging_port(self) -> LoggingPort:
        return self._logging

    @property
    def startup_time_seconds(self) -> float:
        """Time taken by the last ``start()``, in seconds."""
        return self._startup_time

    def register(self, *classes: type) -> AspectLogApplication:
        """Register bean classes with the context; returns self for chaining."""
        for cls in classes:
            self._context.register_bean(cls)
        return self

    def start(self) -> ApplicationContext:
        """Start the context and return it."""
        start = time.perf_counter()
        for source in self.config.loaded_sources:
            self._logger.debug("loaded_config", source=source)

        try:
            self._context.start()
        except BeanCreationException as exc:
            self._logger.error(
                "application_failed",
                error=str(exc),
                subsystem=exc.subsystem,
                provider=exc.provider,
            )
            raise

        self._startup_time = time.perf_counter() - start
        self._logger.debug(
            "started_application",
            beans=self._context.bean_count,
            seconds=round(self._startup_time, 3),
        )
        return self._context
