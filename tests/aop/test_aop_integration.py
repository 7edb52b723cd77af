"""End-to-end AOP tests through the ApplicationContext lifecycle.

Each test registers @service and @aspect beans, starts the context
(triggering AspectBeanPostProcessor weaving), then exercises the woven
methods to verify advice execution order.
"""

from __future__ import annotations

import pytest

from aspectlog.aop.decorators import around, aspect, before, make_marker
from aspectlog.aop.post_processor import AspectBeanPostProcessor
from aspectlog.aop.types import JoinPoint
from aspectlog.container.ordering import order
from aspectlog.container.stereotypes import service
from aspectlog.context.application_context import ApplicationContext
from aspectlog.core.config import Config

audited = make_marker("audited")


class TestRegistrationOrderIndependence:
    def test_service_registered_before_aspect_is_still_woven(self) -> None:
        calls: list[str] = []

        @service
        class Ledger:
            @audited
            def post(self, amount: int) -> int:
                calls.append("method")
                return amount

        @aspect
        class AuditAspect:
            @before("@annotation(audited)")
            def audit(self, jp: JoinPoint) -> None:
                calls.append(f"audit:{jp.args[0]}")

        ctx = ApplicationContext(Config())
        ctx.register_bean(Ledger)
        ctx.register_bean(AuditAspect)
        ctx.register_post_processor(AspectBeanPostProcessor())
        ctx.start()

        assert ctx.get_bean(Ledger).post(7) == 7
        assert calls == ["audit:7", "method"]


class TestOrderedAspects:
    def test_lower_order_aspect_is_outermost(self) -> None:
        calls: list[str] = []

        @service
        class Calculator:
            def add(self, a: int, b: int) -> int:
                calls.append("method")
                return a + b

        @order(5)
        @aspect
        class TimingAspect:
            @around("service.Calculator.add")
            def time_it(self, jp: JoinPoint):
                calls.append("timing:in")
                result = jp.proceed()
                calls.append("timing:out")
                return result

        @order(-5)
        @aspect
        class SecurityAspect:
            @around("service.Calculator.add")
            def guard(self, jp: JoinPoint):
                calls.append("security:in")
                result = jp.proceed()
                calls.append("security:out")
                return result

        ctx = ApplicationContext(Config())
        ctx.register_bean(TimingAspect)
        ctx.register_bean(SecurityAspect)
        ctx.register_bean(Calculator)
        ctx.register_post_processor(AspectBeanPostProcessor())
        ctx.start()

        assert ctx.get_bean(Calculator).add(2, 3) == 5
        assert calls == ["security:in", "timing:in", "method", "timing:out", "security:out"]


class TestFailurePropagation:
    def test_exception_reaches_caller_unchanged(self) -> None:
        calls: list[str] = []

        class PaymentDeclined(Exception):
            pass

        @service
        class Payments:
            def charge(self) -> None:
                raise PaymentDeclined("card declined")

        @aspect
        class WrapAspect:
            @around("service.Payments.charge")
            def wrap(self, jp: JoinPoint):
                calls.append("in")
                result = jp.proceed()
                calls.append("out")
                return result

        ctx = ApplicationContext(Config())
        ctx.register_bean(WrapAspect)
        ctx.register_bean(Payments)
        ctx.register_post_processor(AspectBeanPostProcessor())
        ctx.start()

        with pytest.raises(PaymentDeclined, match="card declined"):
            ctx.get_bean(Payments).charge()
        assert calls == ["in"]
