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
"""Exception hierarchy for aspectlog.

``AspectLogException`` is the root of every error the framework raises
itself. ``InfrastructureException`` covers wiring, weaving and startup.
Exceptions raised by a woven method's own body reach the caller as they
were raised.
"""

from __future__ import annotations

from typing import Any


class AspectLogException(Exception):
    """Root of aspectlog's own errors.

    ``code`` is a stable identifier such as ``AOP_POINTCUT``; ``context``
    carries the values that explain the failure.
    """

    def __init__(self, message: str, code: str | None = None, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict[str, Any] = dict(context) if context else {}


class InfrastructureException(AspectLogException):
    """Bean wiring, advice weaving or startup failed."""
