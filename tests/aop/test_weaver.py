"""Tests for AOP weaver — method wrapping with advice chain."""

from __future__ import annotations

import pytest

from aspectlog.aop.decorators import around, aspect, before, make_marker, operation
from aspectlog.aop.exceptions import ContinuationAlreadyInvokedError
from aspectlog.aop.registry import AspectRegistry
from aspectlog.aop.types import JoinPoint
from aspectlog.aop.weaver import weave_bean
from aspectlog.container.ordering import order

traced = make_marker("traced")


# ---------------------------------------------------------------------------
# Helper beans and aspects
# ---------------------------------------------------------------------------


class MyService:
    def __init__(self, calls: list[str] | None = None) -> None:
        self.calls = calls if calls is not None else []
        self.count = 0

    @traced
    @operation("greetPerson")
    def greet(self, name: str) -> str:
        self.count += 1
        self.calls.append("method")
        return f"hello {name}"

    def explode(self) -> str:
        self.count += 1
        self.calls.append("method")
        raise RuntimeError("boom")

    def untouched(self) -> str:
        return "plain"

    async def fetch(self) -> str:
        return "async"

    def _private(self) -> str:
        return "private"


def _make_registry(*aspects_instances: object) -> AspectRegistry:
    registry = AspectRegistry()
    for inst in aspects_instances:
        registry.register(inst)
    return registry


# ---------------------------------------------------------------------------
# @before
# ---------------------------------------------------------------------------


class TestBeforeAdvice:
    def test_before_runs_before_method(self) -> None:
        calls: list[str] = []

        @aspect
        class LogAspect:
            @before("@annotation(traced)")
            def log_before(self, jp: JoinPoint) -> None:
                calls.append(f"before:{jp.operation_name}:{list(jp.args)}")

        svc = MyService(calls)
        weave_bean(svc, "service.MyService", _make_registry(LogAspect()))

        assert svc.greet("alice") == "hello alice"
        assert calls == ["before:greetPerson:['alice']", "method"]

    def test_before_skips_unmarked_methods(self) -> None:
        calls: list[str] = []

        @aspect
        class LogAspect:
            @before("@annotation(traced)")
            def log_before(self, jp: JoinPoint) -> None:
                calls.append("before")

        svc = MyService(calls)
        woven = weave_bean(svc, "service.MyService", _make_registry(LogAspect()))

        assert woven == ["greet"]
        with pytest.raises(RuntimeError):
            svc.explode()
        assert calls == ["method"]

    def test_operation_name_defaults_to_method_name(self) -> None:
        seen: list[str] = []

        @aspect
        class LogAspect:
            @before("service.MyService.untouched")
            def log_before(self, jp: JoinPoint) -> None:
                seen.append(jp.operation_name)

        svc = MyService()
        weave_bean(svc, "service.MyService", _make_registry(LogAspect()))
        svc.untouched()
        assert seen == ["untouched"]


# ---------------------------------------------------------------------------
# @around
# ---------------------------------------------------------------------------


class TestAroundAdvice:
    def test_around_brackets_method(self) -> None:
        calls: list[str] = []

        @aspect
        class WrapAspect:
            @around("execution(service.MyService.greet)")
            def wrap(self, jp: JoinPoint):
                calls.append("around:before")
                result = jp.proceed()
                calls.append("around:after")
                return result

        svc = MyService(calls)
        weave_bean(svc, "service.MyService", _make_registry(WrapAspect()))

        assert svc.greet("bob") == "hello bob"
        assert calls == ["around:before", "method", "around:after"]
        assert svc.count == 1

    def test_around_can_transform_result(self) -> None:
        @aspect
        class CacheAspect:
            @around("service.MyService.greet")
            def wrap(self, jp: JoinPoint):
                return f"cached:{jp.proceed()}"

        svc = MyService()
        weave_bean(svc, "service.MyService", _make_registry(CacheAspect()))
        assert svc.greet("x") == "cached:hello x"

    def test_failure_skips_trailing_code_and_propagates(self) -> None:
        calls: list[str] = []

        @aspect
        class WrapAspect:
            @around("service.MyService.explode")
            def wrap(self, jp: JoinPoint):
                calls.append("around:before")
                result = jp.proceed()
                calls.append("around:after")
                return result

        svc = MyService(calls)
        weave_bean(svc, "service.MyService", _make_registry(WrapAspect()))

        with pytest.raises(RuntimeError, match="boom"):
            svc.explode()
        assert calls == ["around:before", "method"]

    def test_exception_is_not_wrapped(self) -> None:
        @aspect
        class WrapAspect:
            @around("service.MyService.explode")
            def wrap(self, jp: JoinPoint):
                return jp.proceed()

        svc = MyService()
        weave_bean(svc, "service.MyService", _make_registry(WrapAspect()))

        with pytest.raises(RuntimeError) as exc_info:
            svc.explode()
        assert type(exc_info.value) is RuntimeError

    def test_second_proceed_raises_without_rerunning(self) -> None:
        @aspect
        class GreedyAspect:
            @around("service.MyService.greet")
            def wrap(self, jp: JoinPoint):
                jp.proceed()
                return jp.proceed()

        svc = MyService()
        weave_bean(svc, "service.MyService", _make_registry(GreedyAspect()))

        with pytest.raises(ContinuationAlreadyInvokedError, match="greetPerson"):
            svc.greet("x")
        assert svc.count == 1

    def test_short_circuit_skips_method(self) -> None:
        @aspect
        class VetoAspect:
            @around("service.MyService.greet")
            def wrap(self, jp: JoinPoint):
                return "vetoed"

        svc = MyService()
        weave_bean(svc, "service.MyService", _make_registry(VetoAspect()))
        assert svc.greet("x") == "vetoed"
        assert svc.count == 0

    def test_each_invocation_gets_fresh_continuation(self) -> None:
        @aspect
        class WrapAspect:
            @around("service.MyService.greet")
            def wrap(self, jp: JoinPoint):
                return jp.proceed()

        svc = MyService()
        weave_bean(svc, "service.MyService", _make_registry(WrapAspect()))
        svc.greet("a")
        svc.greet("b")
        assert svc.count == 2


# ---------------------------------------------------------------------------
# Composition order
# ---------------------------------------------------------------------------


class TestComposition:
    def test_around_outside_before(self) -> None:
        calls: list[str] = []

        @aspect
        class ArgsAspect:
            @before("@annotation(traced)")
            def log_args(self, jp: JoinPoint) -> None:
                calls.append("before")

        @aspect
        class WrapAspect:
            @around("execution(service.MyService.greet)")
            def wrap(self, jp: JoinPoint):
                calls.append("around:before")
                result = jp.proceed()
                calls.append("around:after")
                return result

        svc = MyService(calls)
        weave_bean(svc, "service.MyService", _make_registry(ArgsAspect(), WrapAspect()))

        svc.greet("z")
        assert calls == ["around:before", "before", "method", "around:after"]

    def test_multiple_arounds_follow_order(self) -> None:
        calls: list[str] = []

        @order(2)
        @aspect
        class Inner:
            @around("service.MyService.greet")
            def wrap(self, jp: JoinPoint):
                calls.append("inner:in")
                result = jp.proceed()
                calls.append("inner:out")
                return result

        @order(1)
        @aspect
        class Outer:
            @around("service.MyService.greet")
            def wrap(self, jp: JoinPoint):
                calls.append("outer:in")
                result = jp.proceed()
                calls.append("outer:out")
                return result

        svc = MyService(calls)
        weave_bean(svc, "service.MyService", _make_registry(Inner(), Outer()))
        svc.greet("z")

        assert calls == ["outer:in", "inner:in", "method", "inner:out", "outer:out"]

    def test_multiple_befores_follow_registration_order(self) -> None:
        calls: list[str] = []

        @aspect
        class First:
            @before("service.MyService.greet")
            def log(self, jp: JoinPoint) -> None:
                calls.append("first")

        @aspect
        class Second:
            @before("service.MyService.greet")
            def log(self, jp: JoinPoint) -> None:
                calls.append("second")

        svc = MyService(calls)
        weave_bean(svc, "service.MyService", _make_registry(First(), Second()))
        svc.greet("z")

        assert calls == ["first", "second", "method"]

    def test_outer_second_proceed_raises_when_inner_short_circuits(self) -> None:
        @order(1)
        @aspect
        class Retry:
            @around("service.MyService.greet")
            def wrap(self, jp: JoinPoint):
                first = jp.proceed()
                return first, jp.proceed()

        @order(2)
        @aspect
        class Veto:
            @around("service.MyService.greet")
            def wrap(self, jp: JoinPoint):
                return "vetoed"

        svc = MyService()
        weave_bean(svc, "service.MyService", _make_registry(Retry(), Veto()))

        with pytest.raises(ContinuationAlreadyInvokedError):
            svc.greet("z")
        assert svc.count == 0

    def test_outer_second_proceed_raises_when_inner_proceeds(self) -> None:
        @order(1)
        @aspect
        class Retry:
            @around("service.MyService.greet")
            def wrap(self, jp: JoinPoint):
                jp.proceed()
                return jp.proceed()

        @order(2)
        @aspect
        class PassThrough:
            @around("service.MyService.greet")
            def wrap(self, jp: JoinPoint):
                return jp.proceed()

        svc = MyService()
        weave_bean(svc, "service.MyService", _make_registry(Retry(), PassThrough()))

        with pytest.raises(ContinuationAlreadyInvokedError):
            svc.greet("z")
        assert svc.count == 1

    def test_outer_retry_after_inner_failure_raises(self) -> None:
        @order(1)
        @aspect
        class Retry:
            @around("service.MyService.explode")
            def wrap(self, jp: JoinPoint):
                try:
                    return jp.proceed()
                except RuntimeError:
                    return jp.proceed()

        @order(2)
        @aspect
        class PassThrough:
            @around("service.MyService.explode")
            def wrap(self, jp: JoinPoint):
                return jp.proceed()

        svc = MyService()
        weave_bean(svc, "service.MyService", _make_registry(Retry(), PassThrough()))

        with pytest.raises(ContinuationAlreadyInvokedError):
            svc.explode()
        assert svc.count == 1

    def test_return_value_recorded_on_join_point(self) -> None:
        captured: list[JoinPoint] = []

        @aspect
        class Capture:
            @around("service.MyService.greet")
            def wrap(self, jp: JoinPoint):
                captured.append(jp)
                return jp.proceed()

        svc = MyService()
        weave_bean(svc, "service.MyService", _make_registry(Capture()))
        svc.greet("q")

        assert captured[0].return_value == "hello q"
        assert captured[0].target is svc


# ---------------------------------------------------------------------------
# What is not woven
# ---------------------------------------------------------------------------


class TestWeavingScope:
    def test_private_methods_not_woven(self) -> None:
        @aspect
        class All:
            @before("service.MyService.*")
            def log(self, jp: JoinPoint) -> None:
                pass

        svc = MyService()
        woven = weave_bean(svc, "service.MyService", _make_registry(All()))
        assert "_private" not in woven
        assert "fetch" not in woven
        assert sorted(woven) == ["explode", "greet", "untouched"]

    def test_no_bindings_leaves_bean_unchanged(self) -> None:
        svc = MyService()
        original = svc.greet
        assert weave_bean(svc, "service.MyService", AspectRegistry()) == []
        assert svc.greet == original

    def test_wrapper_preserves_name(self) -> None:
        @aspect
        class All:
            @before("service.MyService.greet")
            def log(self, jp: JoinPoint) -> None:
                pass

        svc = MyService()
        weave_bean(svc, "service.MyService", _make_registry(All()))
        assert svc.greet.__name__ == "greet"
