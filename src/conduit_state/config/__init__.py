"""Runtime configuration models and loaders."""

from conduit_state.config.interfaces import ConfigLoader
from conduit_state.config.loader import YamlConfigLoader
from conduit_state.config.models import AppConfig, ConfigLoadRequest

__all__ = ["AppConfig", "ConfigLoadRequest", "ConfigLoader", "YamlConfigLoader"]
