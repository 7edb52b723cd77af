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
"""AOP decorators — @aspect, advice annotations, and method markers."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T", bound=type)
F = TypeVar("F", bound=Callable[..., Any])

ADVICE_TYPE_ATTR = "__aspectlog_advice_type__"
POINTCUT_ATTR = "__aspectlog_pointcut__"
MARKERS_ATTR = "__aspectlog_markers__"
OPERATION_NAME_ATTR = "__aspectlog_operation_name__"


# ---------------------------------------------------------------------------
# @aspect — marks a class as an AOP aspect
# ---------------------------------------------------------------------------


def aspect(cls: T) -> T:
    """Mark a class as an aspect.

    Sets the following metadata on the class:

    * ``__aspectlog_aspect__``     = True
    * ``__aspectlog_stereotype__`` = "aspect"
    """
    cls.__aspectlog_aspect__ = True  # type: ignore[attr-defined]
    cls.__aspectlog_stereotype__ = "aspect"  # type: ignore[attr-defined]
    return cls


# ---------------------------------------------------------------------------
# Advice decorators — @before, @around
# ---------------------------------------------------------------------------


def _make_advice(advice_type: str) -> Callable[[str], Callable[[F], F]]:
    """Build the @before or @around decorator; it records the advice type and pointcut on the method."""

    def factory(pointcut: str) -> Callable[[F], F]:
        def decorator(fn: F) -> F:
            setattr(fn, ADVICE_TYPE_ATTR, advice_type)
            setattr(fn, POINTCUT_ATTR, pointcut)
            return fn

        return decorator

    factory.__name__ = advice_type
    return factory


before = _make_advice("before")
around = _make_advice("around")


# ---------------------------------------------------------------------------
# Markers — opt-in tags matched by ``@annotation(<name>)`` pointcuts
# ---------------------------------------------------------------------------


def make_marker(name: str) -> Callable[[F], F]:
    """Create a marker decorator that tags methods with *name*.

    Usage::

        audited = make_marker("audited")

        class Ledger:
            @audited
            def post(self, entry): ...

        @aspect
        class AuditAspect:
            @before("@annotation(audited)")
            def record(self, jp): ...
    """

    def marker(fn: F) -> F:
        existing = getattr(fn, MARKERS_ATTR, frozenset())
        setattr(fn, MARKERS_ATTR, existing | {name})
        return fn

    marker.__name__ = name
    marker.__qualname__ = name
    return marker


def get_markers(fn: Any) -> frozenset[str]:
    """Return the marker names attached to *fn* (bound or unbound)."""
    return frozenset(getattr(fn, MARKERS_ATTR, frozenset()))


def operation(name: str) -> Callable[[F], F]:
    """Set the public operation name reported in ``JoinPoint.operation_name``."""

    def decorator(fn: F) -> F:
        setattr(fn, OPERATION_NAME_ATTR, name)
        return fn

    return decorator
