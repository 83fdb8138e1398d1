"""Layered TOML configuration.

Layers, lowest precedence first:

1. ``<config dir>/default.toml`` (required)
2. ``<config dir>/<environment>.toml`` (optional)

COLLOQUY_* environment variables are applied afterwards by the settings
model, not here.
"""

import os
import re
import tomllib
from pathlib import Path
from typing import Any

CONFIG_DIR_ENV = "COLLOQUY_CONFIG_DIR"
ENVIRONMENT_ENV = "COLLOQUY_ENV"
DEFAULT_ENVIRONMENT = "development"
DEFAULT_LAYER = "default.toml"

# Environment names become file names inside the config dir
_ENVIRONMENT_NAME = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]*$")

_SEARCH_DEPTH = 5


def get_config_dir() -> Path:
    """Locate the configuration directory.

    COLLOQUY_CONFIG_DIR wins when set and must exist. Otherwise the nearest
    ``config/`` directory from the working directory upwards is used.
    """
    configured = os.environ.get(CONFIG_DIR_ENV)
    if configured:
        path = Path(configured)
        if not path.is_dir():
            raise FileNotFoundError(f"Config directory not found: {configured}")
        return path

    cwd = Path.cwd()
    for candidate in [cwd, *cwd.parents][:_SEARCH_DEPTH]:
        if (candidate / "config").is_dir():
            return candidate / "config"
    return Path("config")


def get_environment() -> str:
    """Return the active environment name from COLLOQUY_ENV."""
    return os.environ.get(ENVIRONMENT_ENV) or DEFAULT_ENVIRONMENT


def load_toml(file_path: Path) -> dict[str, Any]:
    """Parse one TOML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    try:
        with file_path.open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Configuration file not found: {file_path}") from None


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return base updated by override, merging nested tables recursively."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def config_layers(config_dir: Path, env: str) -> list[Path]:
    """List the TOML files that exist for env, lowest precedence first.

    Raises:
        ValueError: If env is not a plain name
        FileNotFoundError: If the default layer is missing
    """
    if not _ENVIRONMENT_NAME.match(env):
        raise ValueError(f"Invalid environment name: {env!r}")

    default_path = config_dir / DEFAULT_LAYER
    if not default_path.is_file():
        raise FileNotFoundError(
            f"Default configuration file not found: {default_path}. "
            f"Create config/{DEFAULT_LAYER} or set {CONFIG_DIR_ENV}."
        )

    layers = [default_path]
    env_path = config_dir / f"{env}.toml"
    if env_path != default_path and env_path.is_file():
        layers.append(env_path)
    return layers


def load_config(config_dir: Path | None = None, env: str | None = None) -> dict[str, Any]:
    """Merge every configuration layer into one mapping.

    Args:
        config_dir: Directory holding the TOML files; discovered when omitted
        env: Environment name; read from COLLOQUY_ENV when omitted
    """
    config_dir = config_dir if config_dir is not None else get_config_dir()
    env = env if env is not None else get_environment()

    config: dict[str, Any] = {}
    for layer in config_layers(config_dir, env):
        config = deep_merge(config, load_toml(layer))
    return config
