"""Client-side "freeze mode": pin the first fetched result per data kind.

Freeze mode keeps a demo visually stable. While it is on, the first successful
fetch of personas, a bias result or a copy result is kept and reused until the
cache is cleared. State lives behind a small key-value boundary so it can be
kept in memory or in a JSON file between runs.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Protocol, TypeVar

from loguru import logger

STORAGE_KEY = "inclusive-hub-freeze"

T = TypeVar("T")


class KeyValueBackend(Protocol):
    def load(self, key: str) -> Optional[Dict[str, Any]]: ...

    def save(self, key: str, value: Dict[str, Any]) -> None: ...


class MemoryBackend:
    def __init__(self) -> None:
        self._data: Dict[str, Dict[str, Any]] = {}

    def load(self, key: str) -> Optional[Dict[str, Any]]:
        value = self._data.get(key)
        return json.loads(json.dumps(value)) if value is not None else None

    def save(self, key: str, value: Dict[str, Any]) -> None:
        self._data[key] = json.loads(json.dumps(value))


class JsonFileBackend:
    """One JSON document per file, keyed at the top level."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            logger.bind(path=str(self.path)).warning("freeze_state_unreadable")
            return {}
        return data if isinstance(data, dict) else {}

    def load(self, key: str) -> Optional[Dict[str, Any]]:
        value = self._read().get(key)
        return value if isinstance(value, dict) else None

    def save(self, key: str, value: Dict[str, Any]) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")


class FreezeStore:
    def __init__(self, backend: Optional[KeyValueBackend] = None, key: str = STORAGE_KEY) -> None:
        self._backend = backend or MemoryBackend()
        self._key = key
        state = self._backend.load(key) or {}
        self.freeze_mode: bool = bool(state.get("freezeMode", False))
        frozen = state.get("frozenData")
        self._frozen: Dict[str, Any] = frozen if isinstance(frozen, dict) else {}

    def _persist(self) -> None:
        self._backend.save(self._key, {"freezeMode": self.freeze_mode, "frozenData": self._frozen})

    def set_freeze_mode(self, enabled: bool) -> None:
        self.freeze_mode = enabled
        self._persist()

    def toggle(self) -> bool:
        self.set_freeze_mode(not self.freeze_mode)
        return self.freeze_mode

    def get(self, kind: str) -> Any:
        return self._frozen.get(kind)

    def set(self, kind: str, data: Any) -> None:
        self._frozen[kind] = data
        self._persist()

    def clear(self) -> None:
        self._frozen = {}
        self._persist()


class FrozenFetcher:
    """Read-through memoization over a fetch call while freeze mode is on.

    Cached values are stored as JSON-compatible dicts; ``decode`` turns them
    back into the caller's type.
    """

    def __init__(self, store: FreezeStore) -> None:
        self.store = store

    def fetch(
        self,
        kind: str,
        fetch: Callable[[], T],
        encode: Callable[[T], Any],
        decode: Callable[[Any], T],
    ) -> T:
        if self.store.freeze_mode:
            cached = self.store.get(kind)
            if cached is not None:
                return decode(cached)
        value = fetch()
        if self.store.freeze_mode:
            self.store.set(kind, encode(value))
        return value
