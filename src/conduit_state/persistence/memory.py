from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(slots=True)
class InMemoryKeyValueStore:
    entries: dict[str, str] = field(default_factory=dict)

    def set(self, key: str, value: str) -> None:
        self.entries[key] = value

    def get(self, key: str) -> Optional[str]:
        return self.entries.get(key)

    def clear(self) -> None:
        self.entries.clear()
