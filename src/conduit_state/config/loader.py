from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Any, Mapping, MutableMapping, Sequence

import yaml
from dotenv import load_dotenv

from conduit_state.config.models import AppConfig, ConfigLoadRequest

logger = logging.getLogger(__name__)

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _deep_merge_dicts(base: MutableMapping[str, Any], override: Mapping[str, Any]) -> None:
    for k, v in override.items():
        if isinstance(v, Mapping) and isinstance(base.get(k), Mapping):
            _deep_merge_dicts(base[k], v)  # type: ignore[index]
            continue
        base[k] = v


def _read_yaml_config(path: Path, *, required: bool) -> dict[str, Any]:
    if not path.exists():
        if required:
            raise FileNotFoundError(f"Config file not found: {path}")
        logger.info("config.yaml_missing path=%s using_defaults=true", path)
        return {}

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Top-level YAML must be a mapping, got: {type(data).__name__}")
    return data


def _env_segments(env_var_name: str, prefix: str) -> Sequence[str]:
    parts = [p.lower() for p in env_var_name[len(prefix) :].split("__") if p]
    if not parts:
        raise ValueError(f"Invalid environment variable override name: {env_var_name}")
    return parts


def _coerce_override(dotted: str, existing: Any, raw: str) -> Any:
    # bool must be checked before int: bool is an int subclass.
    if isinstance(existing, bool):
        lowered = raw.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise ValueError(f"Invalid boolean override for '{dotted}': {raw!r}")
    if isinstance(existing, (int, float)):
        return type(existing)(raw)
    if isinstance(existing, str):
        return raw
    raise TypeError(
        f"Environment variable overrides are only allowed for scalar values. "
        f"Key '{dotted}' is {type(existing).__name__}."
    )


def _apply_env_overrides(config: MutableMapping[str, Any], env_prefix: str) -> None:
    for name, value in os.environ.items():
        if not name.startswith(env_prefix):
            continue

        segments = _env_segments(name, env_prefix)
        dotted = ".".join(segments)
        parent: MutableMapping[str, Any] = config
        for segment in segments[:-1]:
            child = parent.get(segment)
            if not isinstance(child, dict):
                raise KeyError(f"Unknown configuration key path: {dotted}")
            parent = child

        leaf = segments[-1]
        if leaf not in parent:
            raise KeyError(f"Unknown configuration key path: {dotted}")
        parent[leaf] = _coerce_override(dotted, parent[leaf], value)
        logger.debug("config.env_override key=%s", dotted)


class YamlConfigLoader:
    def __init__(self, *, require_file: bool = True) -> None:
        self._require_file = require_file

    async def load(self, request: ConfigLoadRequest = ConfigLoadRequest()) -> AppConfig:
        config: dict[str, Any] = copy.deepcopy(AppConfig().model_dump(mode="python"))

        _deep_merge_dicts(config, _read_yaml_config(Path(request.yaml_path), required=self._require_file))

        if request.dotenv_path is not None and Path(request.dotenv_path).exists():
            load_dotenv(dotenv_path=request.dotenv_path, override=False)

        _apply_env_overrides(config, request.env_prefix)
        return AppConfig.model_validate(config)
