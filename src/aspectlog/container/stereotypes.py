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
"""@service stereotype.

The stereotype becomes the first segment of the qualified names the AOP
weaver matches ``execution(...)`` pointcuts against, so a ``@service``
class ``MessageService`` exposes ``service.MessageService.<method>``.
"""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T", bound=type)

STEREOTYPE_ATTR = "__aspectlog_stereotype__"


def service(cls: T) -> T:
    setattr(cls, STEREOTYPE_ATTR, "service")
    return cls


def get_stereotype(cls: type) -> str:
    return getattr(cls, STEREOTYPE_ATTR, "")
