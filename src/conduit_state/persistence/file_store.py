from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def _atomic_write_json(path: Path, payload: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    tmp_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
    tmp_path.replace(path)


class JsonFileKeyValueStore:
    """
    Key/value store persisted as a single JSON object on disk.

    The whole object is rewritten on every change via a temp file + rename, so a
    crash never leaves a half-written file behind.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._entries = self._read()

    def _read(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        raw = self._path.read_text(encoding="utf-8")
        if not raw.strip():
            return {}
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise ValueError(f"Persistence file must hold a JSON object, got: {type(data).__name__}")

        entries: dict[str, str] = {}
        for key, value in data.items():
            if not isinstance(value, str):
                logger.warning(
                    "persistence.skipped_entry path=%s key=%s value_type=%s",
                    self._path,
                    key,
                    type(value).__name__,
                )
                continue
            entries[key] = value
        return entries

    def set(self, key: str, value: str) -> None:
        self._entries[key] = value
        _atomic_write_json(self._path, self._entries)
        logger.debug("persistence.write path=%s key=%s", self._path, key)

    def get(self, key: str) -> Optional[str]:
        return self._entries.get(key)

    def clear(self) -> None:
        self._entries = {}
        _atomic_write_json(self._path, self._entries)
        logger.debug("persistence.cleared path=%s", self._path)
