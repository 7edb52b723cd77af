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
"""aspectlog container — singleton beans built by constructor injection."""

from aspectlog.container.container import BeanDefinition, Container
from aspectlog.container.exceptions import (
    BeanCreationException,
    BeanCurrentlyInCreationError,
    NoSuchBeanError,
)
from aspectlog.container.ordering import get_order, order
from aspectlog.container.stereotypes import get_stereotype, service

__all__ = [
    "BeanCreationException",
    "BeanCurrentlyInCreationError",
    "BeanDefinition",
    "Container",
    "NoSuchBeanError",
    "get_order",
    "get_stereotype",
    "order",
    "service",
]
