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
"""YAML configuration with dot-notation access, env overrides and dataclass binding."""

from __future__ import annotations

import dataclasses
import importlib.resources
import os
import re
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar, cast, get_type_hints

import yaml  # type: ignore[import-untyped]

T = TypeVar("T")

ROOT_KEY = "toolsmanagement"
ENV_PREFIX = "TOOLS_"
CONFIG_FILE_STEM = "toolsmanagement"
DEFAULTS_FILE = "toolsmanagement-defaults.yaml"

_PLACEHOLDER_RE = re.compile(r"\$\{([^}]+)\}")

_CONFIG_PROPERTIES_ATTR = "__config_prefix__"


def config_properties(prefix: str) -> Callable[[type[T]], type[T]]:
    """Mark a dataclass as bindable to a configuration prefix.

    Usage:
        @config_properties(prefix="toolsmanagement.query")
        @dataclass(frozen=True)
        class QuerySettings:
            max_page_size: int = 50
    """

    def decorator(cls: type[T]) -> type[T]:
        setattr(cls, _CONFIG_PROPERTIES_ATTR, prefix)
        return cls

    return decorator


class Config:
    """Hierarchical configuration with dot-notation access and env var overrides.

    Priority (highest wins):
    1. Environment variables (``TOOLS_SECTION_KEY`` format)
    2. Profile overlays, then project files, then packaged defaults
    3. Dataclass defaults
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}
        self._loaded_sources: list[str] = []

    @property
    def loaded_sources(self) -> list[str]:
        """List of config file paths that were loaded, in merge order."""
        return list(self._loaded_sources)

    @classmethod
    def from_sources(
        cls,
        base_dir: str | Path,
        active_profiles: list[str] | None = None,
        load_defaults: bool = True,
    ) -> Config:
        """Load and merge config from the packaged defaults and *base_dir*.

        Merge order (later wins):
        1. toolsmanagement-defaults.yaml bundled with the package
        2. config/toolsmanagement.yaml
        3. toolsmanagement.yaml
        4. toolsmanagement-{profile}.yaml from both locations
        """
        base_dir = Path(base_dir)
        data: dict[str, Any] = {}
        sources: list[str] = []

        if load_defaults:
            data = cls.load_defaults()
            sources.append(f"{DEFAULTS_FILE} (defaults)")

        for candidate in (base_dir / "config" / f"{CONFIG_FILE_STEM}.yaml", base_dir / f"{CONFIG_FILE_STEM}.yaml"):
            if candidate.is_file():
                data = cls._deep_merge(data, cls._load_yaml(candidate))
                sources.append(str(candidate))

        profiles = active_profiles
        if profiles is None:
            profiles = cls._profiles_from(data)

        for profile in profiles:
            for search_dir in (base_dir / "config", base_dir):
                candidate = search_dir / f"{CONFIG_FILE_STEM}-{profile}.yaml"
                if candidate.is_file():
                    data = cls._deep_merge(data, cls._load_yaml(candidate))
                    sources.append(f"{candidate} (profile: {profile})")

        instance = cls(data)
        instance._loaded_sources = sources
        return instance

    @classmethod
    def from_file(cls, path: str | Path, load_defaults: bool = True) -> Config:
        """Load a single YAML file on top of the packaged defaults."""
        path = Path(path)
        data = cls.load_defaults() if load_defaults else {}
        sources = [f"{DEFAULTS_FILE} (defaults)"] if load_defaults else []
        if path.is_file():
            data = cls._deep_merge(data, cls._load_yaml(path))
            sources.append(str(path))
        instance = cls(data)
        instance._loaded_sources = sources
        return instance

    @staticmethod
    def _profiles_from(data: dict[str, Any]) -> list[str]:
        raw = os.environ.get(f"{ENV_PREFIX}PROFILES_ACTIVE")
        if raw is None:
            raw = data.get(ROOT_KEY, {}).get("profiles", {}).get("active", "")
        return [p.strip() for p in str(raw or "").split(",") if p.strip()]

    @staticmethod
    def _load_yaml(path: Path) -> dict[str, Any]:
        with open(path) as f:
            return yaml.safe_load(f) or {}

    @staticmethod
    def load_defaults() -> dict[str, Any]:
        """Load the defaults bundled in ``toolsmanagement.resources``."""
        defaults_file = importlib.resources.files("toolsmanagement.resources").joinpath(DEFAULTS_FILE)
        return yaml.safe_load(defaults_file.read_text()) or {}

    @staticmethod
    def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Recursively merge override into base, with override values winning."""
        merged = dict(base)
        for key, value in override.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = Config._deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    @staticmethod
    def env_key(key: str) -> str:
        """Environment variable consulted for *key*.

        ``toolsmanagement.datasource.url`` -> ``TOOLS_DATASOURCE_URL``
        """
        base = key.removeprefix(f"{ROOT_KEY}.")
        return ENV_PREFIX + base.upper().replace(".", "_").replace("-", "_")

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key, checking env vars first.

        String values containing ``${...}`` placeholders are resolved from the
        environment, then from other config keys, then from the inline default
        in ``${key:default}``.
        """
        env_val = os.environ.get(self.env_key(key))
        if env_val is not None:
            return env_val

        current = self._walk(key)
        if current is None:
            return default

        if isinstance(current, str) and "${" in current:
            return self._resolve_placeholders(current)
        return current

    def _walk(self, key: str) -> Any:
        current: Any = self._data
        for part in key.split("."):
            if not isinstance(current, dict):
                return None
            current = current.get(part)
            if current is None:
                return None
        return current

    def _resolve_placeholders(self, value: str, _depth: int = 0) -> str:
        if _depth > 10:
            raise ValueError(f"Max recursion depth exceeded resolving placeholders in '{value}'")

        def _replace(match: re.Match[str]) -> str:
            inner = match.group(1)
            ref_key, _, default_val = inner.partition(":")

            env_val = os.environ.get(ref_key)
            if env_val is not None:
                return env_val

            current = self._walk(ref_key)
            if current is not None:
                resolved = str(current)
                if "${" in resolved:
                    resolved = self._resolve_placeholders(resolved, _depth + 1)
                return resolved

            if ":" in inner:
                return cast(str, default_val)

            raise ValueError(f"Cannot resolve placeholder '${{{inner}}}': not found in environment or config")

        return _PLACEHOLDER_RE.sub(_replace, value)

    def get_section(self, prefix: str) -> dict[str, Any]:
        """Get all values under a prefix as a dict."""
        current = self._walk(prefix)
        return current if isinstance(current, dict) else {}

    def bind(self, config_cls: type[T]) -> T:
        """Bind configuration to a ``@config_properties`` dataclass.

        YAML keys may be written kebab-case (``max-page-size``); they bind to
        the matching snake_case field. Environment overrides apply per field.
        """
        prefix = getattr(config_cls, _CONFIG_PROPERTIES_ATTR, None)
        if prefix is None:
            raise ValueError(f"{config_cls.__name__} is not decorated with @config_properties")

        section = {k.replace("-", "_"): v for k, v in self.get_section(prefix).items()}
        hints = get_type_hints(config_cls)
        kwargs: dict[str, Any] = {}
        for field in dataclasses.fields(config_cls):  # type: ignore[arg-type]
            value = self.get(f"{prefix}.{field.name}")
            if value is None:
                value = section.get(field.name)
            if value is None:
                continue
            if isinstance(value, str) and "${" in value:
                value = self._resolve_placeholders(value)
            kwargs[field.name] = _coerce(value, hints.get(field.name))

        return config_cls(**kwargs)


def _coerce(value: Any, expected_type: Any) -> Any:
    if isinstance(value, list):
        return tuple(value)
    if not isinstance(value, str):
        return value
    if expected_type is int:
        return int(value)
    if expected_type is float:
        return float(value)
    if expected_type is bool:
        return value.lower() in ("true", "1", "yes")
    if expected_type == tuple[str, ...]:
        return tuple(v.strip() for v in value.split(",") if v.strip())
    return value
