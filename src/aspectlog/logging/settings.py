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
"""Logging settings read from the ``aspectlog.logging`` config section.

Both adapters route output through stdlib logging on stdout; they differ
in how a record's message is rendered.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aspectlog.core.config import Config


def set_logger_level(name: str, level: str) -> None:
    """Unknown level names fall back to INFO."""
    logging.getLogger(name).setLevel(getattr(logging, level.upper(), logging.INFO))


@dataclass(frozen=True)
class LoggingSettings:
    root_level: str = "INFO"
    format: str = "console"
    logger_levels: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_config(cls, config: Config) -> LoggingSettings:
        levels = {k: str(v).upper() for k, v in config.get_section("aspectlog.logging.level").items() if k != "root"}
        return cls(
            root_level=str(config.get("aspectlog.logging.level.root", "INFO")).upper(),
            format=str(config.get("aspectlog.logging.format", "console")).lower(),
            logger_levels=levels,
        )

    @property
    def is_json(self) -> bool:
        return self.format == "json"

    def install(self, record_format: str) -> None:
        """Replace the root handlers with one stdout handler and apply every level."""
        logging.basicConfig(
            format=record_format,
            stream=sys.stdout,
            level=getattr(logging, self.root_level, logging.INFO),
            force=True,
        )
        for name, level in self.logger_levels.items():
            set_logger_level(name, level)
