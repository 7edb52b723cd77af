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
"""AOP weaver — wraps bean methods with matching advice chains.

Each woven call runs through these stages::

    around (before proceed) -> @before advice -> method -> around (after proceed)

Around advice forms the outer boundary: the first around binding (lowest
``@order``, earliest registration) is outermost. ``@before`` advice runs
when the innermost continuation is entered, right ahead of the method
body. An exception raised anywhere in the chain propagates unchanged; the
code an around advice placed after ``proceed()`` does not run.
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from typing import Any

import structlog

from aspectlog.aop.decorators import OPERATION_NAME_ATTR, get_markers
from aspectlog.aop.exceptions import ContinuationAlreadyInvokedError
from aspectlog.aop.registry import AdviceBinding, AspectRegistry
from aspectlog.aop.types import JoinPoint

logger = structlog.get_logger("aspectlog.aop.weaver")


def weave_bean(bean: Any, qualified_prefix: str, registry: AspectRegistry) -> list[str]:
    """Weave advice into public methods of *bean*.

    For each public method (name not starting with ``_``), build a qualified
    name ``f"{qualified_prefix}.{method_name}"``, collect the method's
    markers, and ask the *registry* for matching bindings. If any match,
    replace the method on the instance with a wrapper that executes the
    advice chain.

    Returns:
        Names of the methods that were woven.
    """
    woven: list[str] = []
    for attr_name, attr in _public_methods(bean):
        qualified_name = f"{qualified_prefix}.{attr_name}"
        bindings = registry.get_matching(qualified_name, get_markers(attr))
        if not bindings:
            continue

        if inspect.iscoroutinefunction(attr):
            # Coroutine methods would return before their body runs.
            logger.warning("async_method_not_woven", method=qualified_name)
            continue

        setattr(
            bean,
            attr_name,
            _build_wrapper(
                bean,
                attr_name,
                attr,
                [b for b in bindings if b.advice_type == "before"],
                [b for b in bindings if b.advice_type == "around"],
            ),
        )
        woven.append(attr_name)

    return woven


def _public_methods(bean: Any) -> list[tuple[str, Any]]:
    """Callable, non-class attributes of *bean* whose names do not start with ``_``."""
    found = []
    for name in dir(bean):
        if name.startswith("_"):
            continue
        value = getattr(bean, name, None)
        if callable(value) and not inspect.isclass(value):
            found.append((name, value))
    return found


def _build_wrapper(
    bean: Any,
    method_name: str,
    original: Callable[..., Any],
    before_bindings: list[AdviceBinding],
    around_bindings: list[AdviceBinding],
) -> Callable[..., Any]:
    """Build a wrapper that applies the advice chain to *original*."""
    operation_name = getattr(original, OPERATION_NAME_ATTR, method_name)

    @functools.wraps(original)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        jp = JoinPoint(
            target=bean,
            method_name=method_name,
            operation_name=operation_name,
            args=args,
            kwargs=kwargs,
        )

        def _invoke_original() -> Any:
            for binding in before_bindings:
                binding.handler(jp)
            return original(*args, **kwargs)

        # Build in reverse so the first around binding is outermost
        proceed_fn: Callable[[], Any] = _invoke_original
        for binding in reversed(around_bindings):
            proceed_fn = _make_around_link(binding.handler, jp, proceed_fn)

        try:
            result = proceed_fn()
        except Exception as exc:
            jp.exception = exc
            raise

        jp.return_value = result
        return result

    return wrapper


def _make_around_link(handler: Any, jp: JoinPoint, next_proceed: Callable[[], Any]) -> Callable[[], Any]:
    """Build one link in the around advice chain.

    Returns a callable that sets ``jp.proceed`` to a single-use
    continuation over *next_proceed* and then invokes *handler*.
    """

    def chained() -> Any:
        jp.proceed = _proceed_once(next_proceed, jp)
        return handler(jp)

    return chained


def _proceed_once(next_proceed: Callable[[], Any], jp: JoinPoint) -> Callable[..., Any]:
    """Wrap *next_proceed* so that a second call raises instead of re-running it."""
    invoked = False

    def proceed(*_a: Any, **_kw: Any) -> Any:
        nonlocal invoked
        if invoked:
            raise ContinuationAlreadyInvokedError(jp.operation_name)
        invoked = True
        try:
            return next_proceed()
        finally:
            # Inner links replace jp.proceed; the caller keeps its own guard.
            jp.proceed = proceed

    return proceed
