"""Durable per-character key/value storage."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import structlog

log = structlog.get_logger(__name__)


class MemoryStorage:
    """Character storage kept in memory only."""

    def __init__(self, initial: Dict[str, Any] | None = None) -> None:
        self._data: Dict[str, Any] = dict(initial or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value
        self._flush()

    def clear(self) -> None:
        self._data.clear()
        self._flush()

    def keys(self) -> List[str]:
        return list(self._data)

    def _flush(self) -> None:
        pass


class CharacterStorage(MemoryStorage):
    """Character storage persisted as a JSON document, rewritten on every change."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(self._load())

    def _load(self) -> Dict[str, Any]:
        if not self.path.is_file():
            return {}
        with self.path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            log.warning("Character storage is not a mapping, ignoring it", path=str(self.path))
            return {}
        return data

    def _flush(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as f:
            json.dump(self._data, f, indent=2)
