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
"""Config: nested settings from the packaged defaults, a YAML/TOML file and the environment.

Lookup order for ``config.get("aspectlog.logging.format")``:

1. ``ASPECTLOG_LOGGING_FORMAT`` in the environment
2. the configuration file (``aspectlog.yaml`` by default)
3. ``aspectlog/resources/aspectlog-defaults.yaml``

String values may embed ``${NAME}``, ``${dotted.key}`` or ``${NAME:fallback}``;
environment variables win over config keys inside a placeholder.
"""

from __future__ import annotations

import importlib.resources
import os
import re
import tomllib
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from aspectlog.core.exceptions import ConfigurationException

DEFAULTS_RESOURCE = "aspectlog-defaults.yaml"
_DEFAULTS_SOURCE = f"{DEFAULTS_RESOURCE} (defaults)"
_PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")


def env_variable_for(key: str) -> str:
    """``aspectlog.logging.format`` -> ``ASPECTLOG_LOGGING_FORMAT``; other keys get the same prefix."""
    return "ASPECTLOG_" + key.removeprefix("aspectlog.").upper().replace(".", "_").replace("-", "_")


def _read(path: Path) -> dict[str, Any]:
    if path.suffix == ".toml":
        with path.open("rb") as fh:
            return tomllib.load(fh)
    with path.open() as fh:
        return yaml.safe_load(fh) or {}


def _packaged_defaults() -> dict[str, Any]:
    text = importlib.resources.files("aspectlog.resources").joinpath(DEFAULTS_RESOURCE).read_text()
    return yaml.safe_load(text) or {}


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class Config:
    def __init__(self, data: dict[str, Any] | None = None, sources: list[str] | None = None) -> None:
        self._data: dict[str, Any] = data or {}
        self._sources = list(sources or [])

    @classmethod
    def defaults(cls) -> Config:
        return cls(_packaged_defaults(), [_DEFAULTS_SOURCE])

    @classmethod
    def from_file(cls, path: str | Path, load_defaults: bool = True) -> Config:
        """Merge *path* over the packaged defaults. A missing file only contributes nothing."""
        path = Path(path)
        data: dict[str, Any] = _packaged_defaults() if load_defaults else {}
        sources = [_DEFAULTS_SOURCE] if load_defaults else []
        if path.is_file():
            data = _merge(data, _read(path))
            sources.append(str(path))
        return cls(data, sources)

    @property
    def loaded_sources(self) -> list[str]:
        """Where the data came from, lowest precedence first."""
        return list(self._sources)

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)

    def get(self, key: str, default: Any = None) -> Any:
        from_env = os.environ.get(env_variable_for(key))
        if from_env is not None:
            return from_env
        value = self._find(key)
        if value is None:
            return default
        if isinstance(value, str):
            return self._expand(key, value, (key,))
        return value

    def get_section(self, prefix: str) -> dict[str, Any]:
        """The mapping stored under *prefix*, or ``{}``."""
        section = self._find(prefix)
        return section if isinstance(section, dict) else {}

    def _find(self, key: str) -> Any:
        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        return node

    def _expand(self, key: str, value: str, chain: tuple[str, ...]) -> str:
        def substitute(match: re.Match[str]) -> str:
            name, _, fallback = match.group(1).partition(":")
            if name in os.environ:
                return os.environ[name]
            if name in chain:
                raise ConfigurationException(key, value, "circular placeholder " + " -> ".join((*chain, name)))
            referenced = self._find(name)
            if referenced is not None:
                return self._expand(key, str(referenced), (*chain, name))
            if ":" in match.group(1):
                return fallback
            raise ConfigurationException(key, value, f"cannot resolve placeholder '${{{name}}}'")

        return _PLACEHOLDER.sub(substitute, value)
