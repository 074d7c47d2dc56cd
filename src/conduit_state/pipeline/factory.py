from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from conduit_state.config.models import AppConfig, PersistenceSettings
from conduit_state.core.generation import ViewGeneration
from conduit_state.persistence.file_store import JsonFileKeyValueStore
from conduit_state.persistence.interfaces import KeyValueStore
from conduit_state.persistence.memory import InMemoryKeyValueStore
from conduit_state.pipeline.action_logging import ActionLoggingMiddleware
from conduit_state.pipeline.async_dispatch import AsyncDispatchMiddleware
from conduit_state.pipeline.interfaces import Middleware
from conduit_state.pipeline.navigation import NavigationMiddleware
from conduit_state.pipeline.persistence_sync import PersistenceSyncMiddleware
from conduit_state.pipeline.store import Store
from conduit_state.reducers.state import AppState, CommonState

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StateRuntime:
    store: Store
    generation: ViewGeneration
    storage: KeyValueStore


def build_storage(settings: PersistenceSettings) -> KeyValueStore:
    if settings.backend == "file":
        return JsonFileKeyValueStore(settings.path)
    return InMemoryKeyValueStore()


def create_runtime(
    config: AppConfig,
    *,
    generation: Optional[ViewGeneration] = None,
    storage: Optional[KeyValueStore] = None,
) -> StateRuntime:
    """
    Build a store wired with the standard stage order:
    navigation -> async dispatch -> persistence sync -> action logging -> reducers.
    """
    generation = generation if generation is not None else ViewGeneration()
    storage = storage if storage is not None else build_storage(config.persistence)

    store = Store(initial_state=AppState(common=CommonState(app_name=config.app.name)))

    stages: list[Middleware] = []
    if config.pipeline.advance_generation_on_unload:
        stages.append(NavigationMiddleware(generation=generation))
    stages.append(AsyncDispatchMiddleware(dispatch=store.dispatch, generation=generation))
    stages.append(PersistenceSyncMiddleware(storage=storage, token_key=config.persistence.token_key))
    if config.pipeline.log_actions:
        level = logging.getLevelName(config.pipeline.action_log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown action log level: {config.pipeline.action_log_level}")
        stages.append(ActionLoggingMiddleware(level=level))
    store.apply_middleware(*stages)

    logger.info(
        "runtime.created app=%s persistence=%s stages=%d",
        config.app.name,
        config.persistence.backend,
        len(stages),
    )
    return StateRuntime(store=store, generation=generation, storage=storage)
