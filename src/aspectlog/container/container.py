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
"""Singleton bean container wired through constructor type hints."""

from __future__ import annotations

import inspect
import typing
from dataclasses import dataclass, field
from typing import Any, TypeVar, cast

from aspectlog.container.exceptions import BeanCurrentlyInCreationError, NoSuchBeanError

T = TypeVar("T")


@dataclass
class BeanDefinition:
    """A registered bean class and, once built, its single instance."""

    bean_type: type
    instance: Any = field(default=None, repr=False)

    @property
    def name(self) -> str:
        return self.bean_type.__name__


class Container:
    """Builds one instance per registered class.

    Constructor parameters are filled by resolving their annotated types.
    A parameter whose type is not registered keeps its default when it has
    one. Dependency cycles raise :class:`BeanCurrentlyInCreationError`.
    """

    def __init__(self) -> None:
        self._definitions: dict[type, BeanDefinition] = {}
        self._in_creation: list[type] = []

    def register(self, cls: type) -> None:
        self._definitions.setdefault(cls, BeanDefinition(cls))

    def register_instance(self, cls: type, instance: Any) -> None:
        """Register *instance* as the bean for *cls*."""
        self._definitions[cls] = BeanDefinition(cls, instance)

    def resolve(self, cls: type[T]) -> T:
        definition = self._definitions.get(cls)
        if definition is None:
            raise NoSuchBeanError(cls)
        if definition.instance is None:
            definition.instance = self._build(cls)
        return cast(T, definition.instance)

    @property
    def definitions(self) -> list[BeanDefinition]:
        """Definitions in registration order."""
        return list(self._definitions.values())

    def _build(self, cls: type) -> Any:
        if cls in self._in_creation:
            raise BeanCurrentlyInCreationError([*self._in_creation, cls])
        self._in_creation.append(cls)
        try:
            return cls(**self._constructor_arguments(cls))
        finally:
            self._in_creation.pop()

    def _constructor_arguments(self, cls: type) -> dict[str, Any]:
        init = cls.__init__  # type: ignore[misc]
        if init is object.__init__:
            return {}

        hints = typing.get_type_hints(init)
        hints.pop("return", None)
        params = inspect.signature(init).parameters

        arguments: dict[str, Any] = {}
        for param_name, param_type in hints.items():
            try:
                arguments[param_name] = self.resolve(param_type)
            except NoSuchBeanError:
                param = params.get(param_name)
                if param is not None and param.default is not inspect.Parameter.empty:
                    continue
                raise NoSuchBeanError(param_type, required_by=cls, parameter=param_name) from None
        return arguments
