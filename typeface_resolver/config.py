"""Configuration loading for typeface-resolver.

Configuration is a small YAML file:

    log_level: INFO
    request:
      width: normal
      weight: bold
      slope: italic
    expand_named_instances: true

All keys are optional.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from typeface_resolver.characteristics import TypeSlope, TypeWeight, TypeWidth
from typeface_resolver.exceptions import ConfigError

CONFIG_ENV_VAR = "TYPEFACE_RESOLVER_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "typeface-resolver" / "config.yaml"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class StyleRequest:
    """Default style asked for when matching a family."""

    width: TypeWidth = TypeWidth.NORMAL
    weight: TypeWeight = TypeWeight.REGULAR
    slope: TypeSlope = TypeSlope.PLAIN


@dataclass
class Config:
    """Runtime configuration."""

    log_level: str = "WARNING"
    request: StyleRequest = field(default_factory=StyleRequest)
    expand_named_instances: bool = False
    source: Path | None = None

    def style_request(self) -> tuple[TypeWidth, TypeWeight, TypeSlope]:
        return self.request.width, self.request.weight, self.request.slope

    @classmethod
    def load(cls, path: Path | str | None = None) -> Config:
        """Load configuration.

        Lookup order: ``path``, then ``$TYPEFACE_RESOLVER_CONFIG``, then
        ``~/.config/typeface-resolver/config.yaml``. Defaults are returned when
        no file is found at the implicit locations.

        Raises:
            ConfigError: If an explicit file is missing or any file is invalid.
        """
        if path is None:
            env_path = os.environ.get(CONFIG_ENV_VAR)
            if env_path:
                path = env_path
            elif DEFAULT_CONFIG_PATH.is_file():
                path = DEFAULT_CONFIG_PATH
            else:
                return cls()

        path = Path(path)
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")

        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if data is None:
            raise ConfigError(f"Empty YAML config file: {path}")
        if not isinstance(data, dict):
            raise ConfigError(f"Config root must be a mapping: {path}")

        config = cls.from_dict(data)
        config.source = path
        return config

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Build a config from parsed YAML, validating every field."""
        unknown = set(data) - {"log_level", "request", "expand_named_instances"}
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        log_level = str(data.get("log_level", "WARNING")).upper()
        if log_level not in LOG_LEVELS:
            raise ConfigError(
                f"log_level: must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}"
            )

        expand = data.get("expand_named_instances", False)
        if not isinstance(expand, bool):
            raise ConfigError("expand_named_instances: must be true or false")

        return cls(
            log_level=log_level,
            request=_parse_request(data.get("request") or {}),
            expand_named_instances=expand,
        )


def _parse_request(data: Any) -> StyleRequest:
    if not isinstance(data, dict):
        raise ConfigError("request: must be a mapping")

    request = StyleRequest()
    parsers = {"width": TypeWidth.parse, "weight": TypeWeight.parse, "slope": TypeSlope.parse}
    for key, value in data.items():
        parser = parsers.get(key)
        if parser is None:
            raise ConfigError(f"request: unknown field {key!r}")
        try:
            raw = value if key == "weight" and isinstance(value, int) else str(value)
            setattr(request, key, parser(raw))
        except ValueError as e:
            raise ConfigError(f"request.{key}: {e}") from e
    return request
