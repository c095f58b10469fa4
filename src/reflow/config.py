"""Reflow configuration and scoped settings files.

A ReflowConfig holds the four layout parameters the engine needs. Settings
files let a host keep defaults plus per-scope overrides (per file type, for
example) in YAML:

    line_visual_width: 80
    tab_visual_width: 8
    use_soft_tabs: true
    scopes:
      source.python:
        line_visual_width: 79
      text.git-commit:
        line_visual_width: 72

Scopes are dotted names. Looking up ``source.python.django`` applies the
overrides for ``source``, then ``source.python``, then
``source.python.django``, so the most specific scope wins.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

import yaml

from reflow.exceptions import InvalidInputError, SettingsError

DEFAULT_LINE_VISUAL_WIDTH = 80
DEFAULT_TAB_VISUAL_WIDTH = 8
DEFAULT_START_COLUMN = 0
DEFAULT_USE_SOFT_TABS = True

_SCOPES_KEY = "scopes"


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True)
class ReflowConfig:
    """Layout parameters for a reflow call.

    Attributes:
        line_visual_width: Maximum visual column for wrapped lines.
        tab_visual_width: Columns between tab stops.
        start_column: Visual column at which the text begins.
        use_soft_tabs: If False and the text used tabs, indentation is
            converted back to tabs after reflowing.
    """

    line_visual_width: int = DEFAULT_LINE_VISUAL_WIDTH
    tab_visual_width: int = DEFAULT_TAB_VISUAL_WIDTH
    start_column: int = DEFAULT_START_COLUMN
    use_soft_tabs: bool = DEFAULT_USE_SOFT_TABS

    def __post_init__(self) -> None:
        if not _is_int(self.line_visual_width) or self.line_visual_width <= 0:
            raise InvalidInputError(
                message=f"line_visual_width must be a positive integer, got {self.line_visual_width!r}"
            )
        if not _is_int(self.tab_visual_width) or self.tab_visual_width <= 0:
            raise InvalidInputError(
                message=f"tab_visual_width must be a positive integer, got {self.tab_visual_width!r}"
            )
        if not _is_int(self.start_column) or self.start_column < 0:
            raise InvalidInputError(
                message=f"start_column must be a non-negative integer, got {self.start_column!r}"
            )
        if not isinstance(self.use_soft_tabs, bool):
            raise InvalidInputError(
                message=f"use_soft_tabs must be a boolean, got {self.use_soft_tabs!r}"
            )

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "ReflowConfig":
        """Build a config from a mapping, using defaults for missing or None values.

        Args:
            values: Any of the four configuration keys.

        Returns:
            A validated ReflowConfig.

        Raises:
            InvalidInputError: If a key is unknown or a value is invalid.
        """
        return cls().merged(values)

    def merged(self, overrides: Mapping[str, Any]) -> "ReflowConfig":
        """Return a copy with the non-None values of `overrides` applied.

        Raises:
            InvalidInputError: If a key is unknown or a value is invalid.
        """
        known = {item.name for item in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise InvalidInputError(message=f"Unknown configuration keys: {', '.join(unknown)}")

        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)


@dataclass(frozen=True, slots=True)
class Settings:
    """Default configuration plus per-scope overrides.

    Attributes:
        defaults: Configuration used when no scope applies.
        scopes: Overrides keyed by dotted scope name.
    """

    defaults: ReflowConfig = field(default_factory=ReflowConfig)
    scopes: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)

    @classmethod
    def load(cls, path: Path | str) -> "Settings":
        """Load settings from a YAML file.

        Args:
            path: Path to the settings file.

        Returns:
            Parsed settings. An empty file yields the built-in defaults.

        Raises:
            SettingsError: If the file is missing, is not valid YAML, or
                contains invalid values.
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as exc:
            raise SettingsError(message=f"Cannot read settings file {path}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise SettingsError(message=f"Invalid YAML in settings file {path}: {exc}") from exc

        return cls.from_mapping(data if data is not None else {})

    @classmethod
    def from_mapping(cls, data: Any) -> "Settings":
        """Build settings from parsed YAML data.

        Raises:
            SettingsError: If the data is not shaped like a settings file or
                contains invalid values.
        """
        if not isinstance(data, Mapping):
            raise SettingsError(message="Settings must be a mapping")

        scopes = data.get(_SCOPES_KEY) or {}
        if not isinstance(scopes, Mapping):
            raise SettingsError(message=f"'{_SCOPES_KEY}' must be a mapping of scope names")

        top_level = {key: value for key, value in data.items() if key != _SCOPES_KEY}
        try:
            defaults = ReflowConfig.from_mapping(top_level)
            for name, overrides in scopes.items():
                if not isinstance(overrides, Mapping):
                    raise SettingsError(message=f"Scope '{name}' must be a mapping")
                # Validate eagerly so a bad scope fails at load time
                defaults.merged(overrides)
        except InvalidInputError as exc:
            raise SettingsError(message=f"Invalid settings: {exc}") from exc

        return cls(
            defaults=defaults,
            scopes={str(name): dict(overrides) for name, overrides in scopes.items()},
        )

    def for_scope(self, scope: str | None = None) -> ReflowConfig:
        """Resolve the configuration for a scope.

        Args:
            scope: Dotted scope name such as ``source.python``, or None.

        Returns:
            Defaults with every matching scope's overrides applied, least
            specific first.
        """
        config = self.defaults
        if not scope:
            return config

        parts = scope.split(".")
        for count in range(1, len(parts) + 1):
            overrides = self.scopes.get(".".join(parts[:count]))
            if overrides:
                config = config.merged(overrides)
        return config
