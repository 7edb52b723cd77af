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
"""ApplicationContext — builds the beans and lets post-processors rewrite them."""

from __future__ import annotations

import time
from typing import TypeVar

from aspectlog.container.container import BeanDefinition, Container
from aspectlog.container.exceptions import BeanCreationException
from aspectlog.container.ordering import get_order
from aspectlog.context.post_processor import BeanPostProcessor
from aspectlog.core.config import Config
from aspectlog.logging.port import LoggingPort
from aspectlog.logging.structlog_adapter import StructlogAdapter

T = TypeVar("T")


class ApplicationContext:
    """Composition root around a :class:`Container`.

    ``Config`` and the ``LoggingPort`` are registered as beans so that
    application classes can ask for them in their constructors. ``start()``
    builds every registered class in ``@order``, then hands each bean to
    the post-processors: all ``before_init`` calls first, then all
    ``after_init`` calls, so a processor sees every bean before it rewrites
    any of them.

    A context starts once. When ``start()`` fails, the context is left
    failed and later calls raise without building anything.
    """

    def __init__(self, config: Config, logging_port: LoggingPort | None = None) -> None:
        self._config = config
        self._logging: LoggingPort = logging_port or StructlogAdapter()
        self._container = Container()
        self._post_processors: list[BeanPostProcessor] = []
        self._started = False
        self._failure: Exception | None = None
        self._logger = self._logging.get_logger("aspectlog.context")

        self._container.register_instance(Config, config)
        self._container.register_instance(LoggingPort, self._logging)

    def register_bean(self, cls: type) -> None:
        self._container.register(cls)

    def register_post_processor(self, processor: BeanPostProcessor) -> None:
        self._post_processors.append(processor)

    def get_bean(self, bean_type: type[T]) -> T:
        return self._container.resolve(bean_type)

    @property
    def config(self) -> Config:
        return self._config

    @property
    def logging_port(self) -> LoggingPort:
        return self._logging

    @property
    def is_started(self) -> bool:
        return self._started

    @property
    def bean_count(self) -> int:
        """Application beans built by start(); Config and LoggingPort excluded."""
        return len(self._application_beans())

    def start(self) -> None:
        """Build the beans and run the post-processors.

        Does nothing on a started context.

        Raises:
            BeanCreationException: startup failed. Other errors are wrapped
                with subsystem ``startup``; a retry after a failure raises
                one chained to the first cause.
        """
        if self._started:
            return
        if self._failure is not None:
            raise BeanCreationException(
                subsystem="startup",
                provider="context",
                reason=f"a previous start() failed: {self._failure}",
            ) from self._failure

        began = time.perf_counter()
        try:
            self._build_beans()
            self._post_process()
        except BeanCreationException as exc:
            self._failure = exc
            raise
        except Exception as exc:
            self._failure = exc
            raise BeanCreationException(subsystem="startup", provider="context", reason=str(exc)) from exc

        self._started = True
        self._logger.debug(
            "context_started",
            beans=self.bean_count,
            duration_ms=round((time.perf_counter() - began) * 1000, 2),
        )

    def _build_beans(self) -> None:
        for definition in sorted(self._container.definitions, key=lambda d: get_order(d.bean_type)):
            self._container.resolve(definition.bean_type)

    def _post_process(self) -> None:
        processors = sorted(self._post_processors, key=lambda pp: get_order(type(pp)))
        beans = self._application_beans()
        for pp in processors:
            for definition in beans:
                definition.instance = pp.before_init(definition.instance, definition.name)
        for pp in processors:
            for definition in beans:
                definition.instance = pp.after_init(definition.instance, definition.name)

    def _application_beans(self) -> list[BeanDefinition]:
        return [
            d
            for d in self._container.definitions
            if d.instance is not None and d.bean_type not in (Config, LoggingPort)
        ]
