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
"""@order: initialization order for beans, nesting order for aspects."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

T = TypeVar("T", bound=type)

ORDER_ATTR = "__aspectlog_order__"


def order(value: int) -> Callable[[T], T]:
    """Lower values are built first and wrap outermost. Unordered classes count as 0."""

    def decorator(cls: T) -> T:
        setattr(cls, ORDER_ATTR, value)
        return cls

    return decorator


def get_order(cls: type) -> int:
    return getattr(cls, ORDER_ATTR, 0)
