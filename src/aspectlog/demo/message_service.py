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
"""MessageService — the operation the demo aspects intercept."""

from __future__ import annotations

from aspectlog.aop.decorators import operation
from aspectlog.container.stereotypes import service
from aspectlog.demo.markers import arguments_log
from aspectlog.logging.port import LoggingPort


@service
class MessageService:
    def __init__(self, logging_port: LoggingPort) -> None:
        self._logger = logging_port.get_logger(f"{__name__}.{type(self).__name__}")

    @arguments_log
    @operation("processMessage")
    def process_message(self, message: str) -> None:
        self._logger.info(f"Processing message: {message}")
