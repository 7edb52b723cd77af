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
"""Composition root — wires the demo beans and issues the single call."""

from __future__ import annotations

from aspectlog.aop.post_processor import AspectBeanPostProcessor
from aspectlog.context.application_context import ApplicationContext
from aspectlog.core.application import AspectLogApplication
from aspectlog.core.config import Config
from aspectlog.demo.arguments_aspect import ArgumentsAspect
from aspectlog.demo.logging_aspect import LoggingAspect
from aspectlog.demo.message_service import MessageService
from aspectlog.logging.port import LoggingPort

DEMO_MESSAGE = "Hello World!"


def register_demo_beans(context: ApplicationContext) -> None:
    """Register the aspects, the service, and the weaving post-processor."""
    context.register_bean(ArgumentsAspect)
    context.register_bean(LoggingAspect)
    context.register_bean(MessageService)
    context.register_post_processor(AspectBeanPostProcessor())


def build_context(config: Config | None = None, logging_port: LoggingPort | None = None) -> ApplicationContext:
    """Build and start a context whose MessageService is already woven.

    Logging is not configured here; callers that want the console output
    go through :func:`run`.
    """
    context = ApplicationContext(config or Config(), logging_port=logging_port)
    register_demo_beans(context)
    context.start()
    return context


def run(config: Config | None = None) -> None:
    """Configure logging, start the context, and process the demo message once."""
    app = AspectLogApplication(config)
    register_demo_beans(app.context)
    context = app.start()
    context.get_bean(MessageService).process_message(DEMO_MESSAGE)
