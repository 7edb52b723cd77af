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
"""AspectRegistry — advice bindings known to the weaver, in nesting order."""

from __future__ import annotations

import inspect
import itertools
from dataclasses import dataclass, field
from typing import Any

from aspectlog.aop.decorators import ADVICE_TYPE_ATTR, POINTCUT_ATTR
from aspectlog.aop.exceptions import RegistryFrozenError
from aspectlog.aop.pointcut import Pointcut, parse_pointcut
from aspectlog.container.ordering import get_order


@dataclass(frozen=True)
class AdviceBinding:
    """One advice method of an aspect together with its pointcut.

    ``aspect_order`` comes from ``@order`` on the aspect class and
    ``sequence`` from registration; together they fix the position of the
    advice in a woven call.
    """

    advice_type: str
    pointcut: str
    handler: Any
    aspect_order: int = 0
    sequence: int = 0
    parsed: Pointcut = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "parsed", parse_pointcut(self.pointcut))

    @property
    def sort_key(self) -> tuple[int, int]:
        return self.aspect_order, self.sequence

    def matches(self, qualified_name: str, markers: frozenset[str] = frozenset()) -> bool:
        return self.parsed.matches(qualified_name, markers)


class AspectRegistry:
    """Collects advice from aspect instances until frozen.

    The post-processor freezes the registry before the first bean is
    woven, so every lookup made by a woven call sees the same bindings.
    """

    def __init__(self) -> None:
        self._bindings: list[AdviceBinding] = []
        self._counter = itertools.count()
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        self._frozen = True

    def register(self, aspect_instance: Any) -> None:
        """Add every advice method of *aspect_instance*, taken in method-name order.

        Raises:
            RegistryFrozenError: the registry is frozen.
            InvalidPointcutError: an advice method carries a malformed pointcut.
        """
        if self._frozen:
            raise RegistryFrozenError(type(aspect_instance))

        aspect_order = get_order(type(aspect_instance))
        advice = [
            (getattr(method, ADVICE_TYPE_ATTR), getattr(method, POINTCUT_ATTR), method)
            for _, method in inspect.getmembers(aspect_instance, inspect.ismethod)
            if hasattr(method, ADVICE_TYPE_ATTR) and hasattr(method, POINTCUT_ATTR)
        ]
        # Parse everything first so a bad pointcut leaves the registry unchanged.
        new = [
            AdviceBinding(advice_type, pointcut, handler, aspect_order, next(self._counter))
            for advice_type, pointcut, handler in advice
        ]
        self._bindings = sorted([*self._bindings, *new], key=lambda b: b.sort_key)

    def get_all_bindings(self) -> list[AdviceBinding]:
        return list(self._bindings)

    def get_matching(self, qualified_name: str, markers: frozenset[str] = frozenset()) -> list[AdviceBinding]:
        """Bindings for the method named *qualified_name* that carries *markers*, in nesting order."""
        return [b for b in self._bindings if b.matches(qualified_name, markers)]
