"""Token persistence collaborators and session restore."""

from conduit_state.persistence.file_store import JsonFileKeyValueStore
from conduit_state.persistence.interfaces import DEFAULT_TOKEN_KEY, EMPTY_TOKEN, KeyValueStore
from conduit_state.persistence.memory import InMemoryKeyValueStore
from conduit_state.persistence.session import restore_session

__all__ = [
    "DEFAULT_TOKEN_KEY",
    "EMPTY_TOKEN",
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "KeyValueStore",
    "restore_session",
]
