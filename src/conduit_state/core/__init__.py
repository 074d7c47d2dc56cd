"""Action vocabulary and the shared primitives of the pipeline."""

from conduit_state.core.errors import OperationFailure
from conduit_state.core.generation import ViewGeneration
from conduit_state.core.models import PAGE_UNLOADED_TYPES, Action, ActionType, Article, TabKind

__all__ = [
    "Action",
    "ActionType",
    "Article",
    "OperationFailure",
    "PAGE_UNLOADED_TYPES",
    "TabKind",
    "ViewGeneration",
]
