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
"""LoggingAspect — brackets MessageService.process_message with log lines."""

from __future__ import annotations

from typing import Any

from aspectlog.aop.decorators import around, aspect
from aspectlog.aop.types import JoinPoint
from aspectlog.logging.port import LoggingPort


@aspect
class LoggingAspect:
    def __init__(self, logging_port: LoggingPort) -> None:
        self._logger = logging_port.get_logger(f"{__name__}.{type(self).__name__}")

    @around("execution(service.MessageService.process_message)")
    def log_around(self, jp: JoinPoint) -> Any:
        self._logger.info("Before processing message")
        # No try/finally: a failing call skips the "after" line.
        result = jp.proceed()
        self._logger.info("After processing message")
        return result
