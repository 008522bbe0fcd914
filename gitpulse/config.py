"""
Config Layer - Settings for the status refresher.

Values come from ``GITPULSE_*`` environment variables and can be
overridden per invocation from the command line. A ``Config`` is read on
every refresh, so a caller may swap it between calls.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from .errors import ConfigError

DEFAULT_UPDATE_INTERVAL = 30.0
DEFAULT_WARNING_THRESHOLD = 250
DEFAULT_CHANGE_COMMAND = "git-wordcount"

ENV_UPDATE_INTERVAL = "GITPULSE_UPDATE_INTERVAL"
ENV_WARNING_THRESHOLD = "GITPULSE_WARNING_THRESHOLD"
ENV_USE_BUILTIN_DIFF = "GITPULSE_USE_BUILTIN_DIFF"
ENV_CHANGE_COMMAND = "GITPULSE_CHANGE_COMMAND"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Config:
    """Settings consulted before each count and format operation."""
    update_interval: float = DEFAULT_UPDATE_INTERVAL
    warning_threshold: int = DEFAULT_WARNING_THRESHOLD
    use_builtin_diff: bool = True
    change_command: str = DEFAULT_CHANGE_COMMAND

    def __post_init__(self) -> None:
        if not math.isfinite(self.update_interval) or self.update_interval < 0:
            raise ConfigError(f"update interval must be a finite number >= 0, got {self.update_interval}")
        if self.warning_threshold < 0:
            raise ConfigError(f"warning threshold must be >= 0, got {self.warning_threshold}")
        if not self.use_builtin_diff and not self.change_command.strip():
            raise ConfigError("change command required when the built-in diff is disabled")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """Build a config from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Returns:
            Config: Defaults with any ``GITPULSE_*`` values applied

        Raises:
            ConfigError: If a variable holds an unparseable value
        """
        env = os.environ if environ is None else environ
        values = {}

        raw = env.get(ENV_UPDATE_INTERVAL)
        if raw:
            values["update_interval"] = _parse_float(ENV_UPDATE_INTERVAL, raw)

        raw = env.get(ENV_WARNING_THRESHOLD)
        if raw:
            values["warning_threshold"] = _parse_int(ENV_WARNING_THRESHOLD, raw)

        raw = env.get(ENV_USE_BUILTIN_DIFF)
        if raw:
            values["use_builtin_diff"] = parse_bool(ENV_USE_BUILTIN_DIFF, raw)

        raw = env.get(ENV_CHANGE_COMMAND)
        if raw:
            values["change_command"] = raw.strip()

        return cls(**values)

    def with_overrides(self, **overrides) -> "Config":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if not changes:
            return self
        return replace(self, **changes)


def parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigError(f"{name}: expected a boolean, got {raw!r}")


def _parse_float(name: str, raw: str) -> float:
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"{name}: expected a number of seconds, got {raw!r}")


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name}: expected an integer, got {raw!r}")
