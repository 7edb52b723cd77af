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
"""ArgumentsAspect — logs the arguments of marked methods before they run."""

from __future__ import annotations

from aspectlog.aop.decorators import aspect, before
from aspectlog.aop.types import JoinPoint
from aspectlog.logging.port import LoggingPort


def _render_value(value: object) -> str:
    return "null" if value is None else str(value)


def render_arguments(jp: JoinPoint) -> str:
    """Render call arguments as ``[a, b, key=value]``; ``None`` renders as ``null``."""
    rendered = [_render_value(arg) for arg in jp.args]
    rendered.extend(f"{key}={_render_value(value)}" for key, value in jp.kwargs.items())
    return f"[{', '.join(rendered)}]"


@aspect
class ArgumentsAspect:
    """Applies to every method carrying the ``arguments_log`` marker."""

    def __init__(self, logging_port: LoggingPort) -> None:
        self._logger = logging_port.get_logger(f"{__name__}.{type(self).__name__}")

    @before("@annotation(arguments_log)")
    def log_arguments(self, jp: JoinPoint) -> None:
        self._logger.info(f"Method {jp.operation_name} with parameters {render_arguments(jp)} will execute")
