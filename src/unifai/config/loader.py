"""Build :class:`UnifaiConfig` from layered TOML files.

Layers, lowest priority first: model defaults, the user file
(``$XDG_CONFIG_HOME/unifai/config.toml``), ``./unifai.toml``, the file named
by ``$UNIFAI_CONFIG``, the ``path`` given to :func:`load_config`, and finally
programmatic ``overrides``. The first two are optional; the last two must
exist when named.

``backend.api_key`` and ``chat.api_key`` left unset by every layer are read
from the environment variables their ``api_key_env`` fields name.
"""

from __future__ import annotations

import copy
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from unifai.core.errors import ConfigError

from .schema import UnifaiConfig

CONFIG_ENV_VAR = "UNIFAI_CONFIG"
PROJECT_FILE = "unifai.toml"


def _optional_layers() -> list[Path]:
    config_home = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    candidates = (Path(config_home) / "unifai" / "config.toml", Path.cwd() / PROJECT_FILE)
    return [p for p in candidates if p.is_file()]


def _required_layer(value: str | Path, source: str) -> Path:
    layer = Path(value)
    if not layer.is_file():
        msg = f"{source} not found: {value}"
        raise ConfigError(msg)
    return layer


def _parse(layer: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(layer.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {layer}: {e}"
        raise ConfigError(msg) from e
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Cannot read config file {layer}: {e}"
        raise ConfigError(msg) from e


def _merge_into(target: dict[str, Any], layer: Mapping[str, Any]) -> None:
    """Apply *layer* onto *target* in place. Tables merge key by key."""
    for key, value in layer.items():
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            _merge_into(current, value)
        else:
            # Copied so later layers never write into this one
            target[key] = copy.deepcopy(value)


def _fill_api_keys(config: UnifaiConfig) -> None:
    for section in (config.backend, config.chat):
        if section.api_key is None and section.api_key_env:
            section.api_key = os.environ.get(section.api_key_env)


def load_config(
    path: str | Path | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> UnifaiConfig:
    """Merge every config layer and validate the result.

    Raises:
        ConfigError: A named file is missing, a file is unreadable or not
            TOML, or the merged values fail validation.
    """
    layers = _optional_layers()
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        layers.append(_required_layer(env_path, f"{CONFIG_ENV_VAR} file"))
    if path is not None:
        layers.append(_required_layer(path, "Config file"))

    data: dict[str, Any] = {}
    for layer in layers:
        _merge_into(data, _parse(layer))
    _merge_into(data, overrides or {})

    try:
        config = UnifaiConfig.model_validate(data)
    except ValidationError as e:
        msg = f"Configuration validation failed: {e}"
        raise ConfigError(msg) from e

    _fill_api_keys(config)
    return config
