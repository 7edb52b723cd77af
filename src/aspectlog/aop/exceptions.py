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
"""AOP exceptions — invalid pointcuts and misuse of the advice chain."""

from __future__ import annotations

from aspectlog.kernel.exceptions import InfrastructureException


class InvalidPointcutError(InfrastructureException):
    """A pointcut expression could not be parsed."""

    def __init__(self, expression: str, reason: str) -> None:
        self.expression = expression
        self.reason = reason
        super().__init__(
            message=f"Invalid pointcut '{expression}': {reason}",
            code="AOP_POINTCUT",
            context={"expression": expression},
        )


class RegistryFrozenError(InfrastructureException):
    """An aspect was registered after weaving started."""

    def __init__(self, aspect_type: type) -> None:
        self.aspect_type = aspect_type
        super().__init__(
            message=f"Cannot register aspect '{aspect_type.__name__}': the aspect registry is frozen",
            code="AOP_REGISTRY_FROZEN",
        )


class ContinuationAlreadyInvokedError(InfrastructureException):
    """Around advice called ``proceed()`` more than once for one invocation."""

    def __init__(self, operation_name: str) -> None:
        self.operation_name = operation_name
        super().__init__(
            message=f"proceed() was already invoked for '{operation_name}'",
            code="AOP_PROCEED_TWICE",
            context={"operation": operation_name},
        )
