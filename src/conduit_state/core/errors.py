from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence


class OperationFailure(Exception):
    """
    Raised by a pending operation that the remote side rejected.

    `payload` is the error body as returned by the service, usually
    `{"errors": {"field": ["message", ...]}}`. The async dispatch stage
    forwards it as the action payload with `error=True`.
    """

    def __init__(self, payload: Optional[Mapping[str, Any]] = None) -> None:
        super().__init__(payload)
        self.payload = payload

    @classmethod
    def from_errors(cls, errors: Mapping[str, Sequence[str]]) -> "OperationFailure":
        return cls({"errors": {k: list(v) for k, v in errors.items()}})
