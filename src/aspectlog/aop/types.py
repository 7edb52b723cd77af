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
"""AOP core types — JoinPoint dataclass."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass
class JoinPoint:
    """Describes one invocation of an intercepted method.

    A new JoinPoint is created for every call and discarded when the call
    returns or raises.

    Attributes:
        target: The object whose method is being intercepted.
        method_name: Python attribute name of the method being called.
        operation_name: Public name of the operation. Equal to
            ``method_name`` unless the method is decorated with
            :func:`~aspectlog.aop.decorators.operation`.
        args: Positional arguments passed to the method.
        kwargs: Keyword arguments passed to the method.
        return_value: The return value (set after a successful call).
        exception: Exception raised by the call, if any.
        proceed: Continuation for around advice. Runs the rest of the
            chain and may be called at most once.
    """

    target: Any
    method_name: str
    args: tuple
    kwargs: dict[str, Any]
    operation_name: str = ""
    return_value: Any = None
    exception: Exception | None = None
    proceed: Callable[..., Any] | None = None

    def __post_init__(self) -> None:
        if not self.operation_name:
            self.operation_name = self.method_name
