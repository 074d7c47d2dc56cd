"""Dispatch pipeline: the store, its middleware stages and the standard wiring."""

from conduit_state.persistence.interfaces import DEFAULT_TOKEN_KEY
from conduit_state.pipeline.action_logging import ActionLoggingMiddleware
from conduit_state.pipeline.async_dispatch import AsyncDispatchMiddleware
from conduit_state.pipeline.factory import StateRuntime, build_storage, create_runtime
from conduit_state.pipeline.interfaces import Dispatch, Forward, Middleware
from conduit_state.pipeline.navigation import NavigationMiddleware
from conduit_state.pipeline.persistence_sync import PersistenceSyncMiddleware
from conduit_state.pipeline.store import Store

__all__ = [
    "ActionLoggingMiddleware",
    "AsyncDispatchMiddleware",
    "DEFAULT_TOKEN_KEY",
    "Dispatch",
    "Forward",
    "Middleware",
    "NavigationMiddleware",
    "PersistenceSyncMiddleware",
    "StateRuntime",
    "Store",
    "build_storage",
    "create_runtime",
]
