"""Options loader for tools that read their parsing options from a file.

The file is a JSON object holding at most two keys, ``loose`` and
``includePrerelease``, both booleans. Missing keys take their defaults.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from .errors import ConfigError
from .models.options import DEFAULT_OPTIONS, Options

CONFIG_PATH_ENV_VAR = "NPM_SEMVER_CONFIG"
_KEYS = ("loose", "includePrerelease")


def _resolve_config_path(path: Path | str | None = None) -> Path | None:
    """Resolve the configuration file path.

    Priority:
    1. Explicit path argument
    2. NPM_SEMVER_CONFIG environment variable
    3. None (use the default options)
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)

    return None


def load_options(path: Path | str | None = None) -> Options:
    """Load parsing options from a JSON file.

    Args:
        path: Optional path to the config file. If not provided, uses the
            NPM_SEMVER_CONFIG env var; without either the defaults are returned.

    Raises:
        ConfigError: If the file cannot be read or contains invalid data.
    """
    config_path = _resolve_config_path(path)
    if config_path is None:
        return DEFAULT_OPTIONS

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read configuration file: {exc}") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in configuration file: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a JSON object")

    unknown = sorted(set(data) - set(_KEYS))
    if unknown:
        raise ConfigError(
            f"Unknown option(s): {', '.join(unknown)}. " f"Recognised options: {', '.join(_KEYS)}"
        )

    for key in _KEYS:
        if key in data and not isinstance(data[key], bool):
            raise ConfigError(f"Option '{key}' must be a boolean")

    return Options.from_dict(data)
