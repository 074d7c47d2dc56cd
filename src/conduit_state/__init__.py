"""Client application state layer for Conduit: async action pipeline and reducers."""

from conduit_state.core import Action, ActionType, OperationFailure, ViewGeneration
from conduit_state.pipeline import Store, create_runtime
from conduit_state.reducers import AppState

__all__ = [
    "Action",
    "ActionType",
    "AppState",
    "OperationFailure",
    "Store",
    "ViewGeneration",
    "create_runtime",
]
