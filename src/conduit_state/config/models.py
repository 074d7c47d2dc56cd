from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from conduit_state.persistence.interfaces import DEFAULT_TOKEN_KEY


class AppSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = "conduit"


class FileRotationSettings(BaseModel):
    """
    Date-based rotation settings (daily).

    This maps cleanly to Python's standard library TimedRotatingFileHandler behavior.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    backup_count: int = 5


class FileLoggingSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    enabled: bool = True
    path: str = "data/logs/conduit-state.log"
    rotation: FileRotationSettings = Field(default_factory=FileRotationSettings)


class LoggingSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    level: str = "INFO"
    file: FileLoggingSettings = Field(default_factory=FileLoggingSettings)


class PersistenceSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    backend: Literal["memory", "file"] = "memory"
    path: str = "data/state/storage.json"
    token_key: str = DEFAULT_TOKEN_KEY


class PipelineSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    # Stage toggles
    log_actions: bool = True
    action_log_level: str = "DEBUG"

    # Navigation
    advance_generation_on_unload: bool = True


class AppConfig(BaseModel):
    """Effective runtime configuration after applying all precedence rules."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    persistence: PersistenceSettings = Field(default_factory=PersistenceSettings)
    pipeline: PipelineSettings = Field(default_factory=PipelineSettings)


@dataclass(frozen=True, slots=True)
class ConfigLoadRequest:
    """
    Optional inputs for a configuration loader.

    Implementations may use these to control where configuration is read from.
    """

    yaml_path: str = "data/config/config.yaml"
    env_prefix: str = "APP__"
    dotenv_path: Optional[str] = ".env"
