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
"""Aspect-Oriented Programming support for aspectlog."""

from aspectlog.aop.decorators import around, aspect, before, get_markers, make_marker, operation
from aspectlog.aop.exceptions import (
    ContinuationAlreadyInvokedError,
    InvalidPointcutError,
    RegistryFrozenError,
)
from aspectlog.aop.pointcut import Pointcut, matches_pointcut, parse_pointcut
from aspectlog.aop.post_processor import AspectBeanPostProcessor
from aspectlog.aop.registry import AdviceBinding, AspectRegistry
from aspectlog.aop.types import JoinPoint
from aspectlog.aop.weaver import weave_bean

__all__ = [
    "AdviceBinding",
    "AspectBeanPostProcessor",
    "AspectRegistry",
    "ContinuationAlreadyInvokedError",
    "InvalidPointcutError",
    "JoinPoint",
    "Pointcut",
    "RegistryFrozenError",
    "around",
    "aspect",
    "before",
    "get_markers",
    "make_marker",
    "matches_pointcut",
    "operation",
    "parse_pointcut",
    "weave_bean",
]
