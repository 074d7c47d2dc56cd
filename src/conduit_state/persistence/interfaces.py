from __future__ import annotations

from typing import Optional, Protocol

DEFAULT_TOKEN_KEY = "jwt"
EMPTY_TOKEN = ""


class KeyValueStore(Protocol):
    """
    Best-effort synchronous key/value persistence.

    Writes are last-write-wins; implementations do not raise for ordinary writes.
    """

    def set(self, key: str, value: str) -> None:
        ...

    def get(self, key: str) -> Optional[str]:
        ...

    def clear(self) -> None:
        ...
