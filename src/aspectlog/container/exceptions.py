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
"""Errors raised while the container builds beans."""

from __future__ import annotations

from aspectlog.kernel.exceptions import InfrastructureException


class BeanCreationException(InfrastructureException):
    """A bean could not be created; the context cannot start."""

    def __init__(self, subsystem: str, provider: str, reason: str) -> None:
        self.subsystem = subsystem
        self.provider = provider
        self.reason = reason
        super().__init__(
            message=f"Cannot create {provider} ({subsystem}): {reason}",
            code=f"BEAN_CREATION_{subsystem.upper()}",
        )


def _type_name(bean_type: object) -> str:
    return getattr(bean_type, "__name__", repr(bean_type))


class NoSuchBeanError(BeanCreationException):
    """No bean is registered for a requested type."""

    def __init__(self, bean_type: object, *, required_by: type | None = None, parameter: str | None = None) -> None:
        self.bean_type = bean_type
        self.required_by = required_by
        self.parameter = parameter

        reason = f"no bean of type '{_type_name(bean_type)}' is registered"
        if required_by is not None:
            reason += f" (parameter '{parameter}' of {required_by.__qualname__})"
        super().__init__(
            subsystem="resolution",
            provider=required_by.__qualname__ if required_by is not None else "container",
            reason=reason,
        )


class BeanCurrentlyInCreationError(BeanCreationException):
    """A bean depends on itself, directly or through other beans.

    ``chain`` lists the types in resolution order and ends with the type
    that closed the cycle.
    """

    def __init__(self, chain: list[type]) -> None:
        self.chain = chain
        path = " -> ".join(t.__name__ for t in chain)
        super().__init__(subsystem="resolution", provider=chain[-1].__name__, reason=f"circular dependency {path}")
