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
"""Post-processor that turns @aspect beans into advice and weaves it into the rest."""

from __future__ import annotations

from typing import Any

from aspectlog.aop.registry import AspectRegistry
from aspectlog.aop.weaver import weave_bean
from aspectlog.container.stereotypes import get_stereotype


def qualified_prefix(bean_type: type) -> str:
    """``<stereotype>.<Class>``, or ``<module>.<Class>`` for classes without one."""
    return f"{get_stereotype(bean_type) or bean_type.__module__}.{bean_type.__name__}"


class AspectBeanPostProcessor:
    """Registers aspects in ``before_init`` and weaves other beans in ``after_init``.

    The registry is frozen by the first ``after_init``; by then the context
    has passed every bean through ``before_init``, so all aspects are known
    whatever order they were registered in.
    """

    def __init__(self) -> None:
        self._registry = AspectRegistry()

    @property
    def registry(self) -> AspectRegistry:
        return self._registry

    def before_init(self, bean: Any, bean_name: str) -> Any:
        if getattr(type(bean), "__aspectlog_aspect__", False):
            self._registry.register(bean)
        return bean

    def after_init(self, bean: Any, bean_name: str) -> Any:
        if not self._registry.frozen:
            self._registry.freeze()
        if not getattr(type(bean), "__aspectlog_aspect__", False):
            weave_bean(bean, qualified_prefix(type(bean)), self._registry)
        return bean
