from __future__ import annotations

from typing import Protocol

from conduit_state.config.models import AppConfig, ConfigLoadRequest


class ConfigLoader(Protocol):
    """
    Loads effective runtime configuration.

    Precedence, lowest first: model defaults, the YAML file, then
    `APP__SECTION__KEY` environment overrides (optionally seeded from .env).
    """

    async def load(self, request: ConfigLoadRequest = ConfigLoadRequest()) -> AppConfig:
        ...
