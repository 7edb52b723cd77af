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
"""Demo application: one service, two logging aspects."""

from aspectlog.demo.application import DEMO_MESSAGE, build_context, register_demo_beans, run
from aspectlog.demo.arguments_aspect import ArgumentsAspect
from aspectlog.demo.logging_aspect import LoggingAspect
from aspectlog.demo.message_service import MessageService

__all__ = [
    "ArgumentsAspect",
    "DEMO_MESSAGE",
    "LoggingAspect",
    "MessageService",
    "build_context",
    "register_demo_beans",
    "run",
]
