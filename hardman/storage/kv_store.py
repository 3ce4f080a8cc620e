"""
Key-value persistence for preferences, missions and XP

MEMORY ARCHITECTURE:
- One flat key -> value mapping per device (str, int or float values)
- InMemoryKeyValueStore: tests and throwaway sessions
- JsonFileKeyValueStore: a single JSON file under DATA_PATH

Writes are last-writer-wins: each set() updates the in-memory snapshot in call
order and flushes the whole snapshot, so a slow earlier flush can never
overwrite a later value.
"""
import asyncio
import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional, Union

from hardman.exceptions import ValidationError, wrap_storage_exception

logger = logging.getLogger(__name__)

Value = Union[str, int, float]


class KeyValueStore:
    """Abstract async key-value store with typed, lenient getters"""

    async def get(self, key: str) -> Optional[Value]:
        raise NotImplementedError

    async def set(self, key: str, value: Value) -> None:
        raise NotImplementedError

    async def get_str(self, key: str, default: str = "") -> str:
        value = await self.get(key)
        if value is None:
            return default
        return value if isinstance(value, str) else str(value)

    async def get_int(self, key: str, default: int = 0) -> int:
        value = await self.get(key)
        if isinstance(value, bool) or value is None:
            return default
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.warning(f"Stored value for {key} is not an integer: {value!r}")
            return default

    async def get_float(self, key: str, default: float = 0.0) -> float:
        value = await self.get(key)
        if isinstance(value, bool) or value is None:
            return default
        try:
            return float(value)
        except (TypeError, ValueError):
            logger.warning(f"Stored value for {key} is not a number: {value!r}")
            return default

    @staticmethod
    def _check_value(key: str, value: Value) -> None:
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            raise ValidationError(
                message=f"Unsupported value type {type(value).__name__} for {key}",
                field=key,
                value=value,
            )


class InMemoryKeyValueStore(KeyValueStore):
    """Dictionary-backed store (not persisted)"""

    def __init__(self, initial: Optional[Dict[str, Value]] = None):
        self._data: Dict[str, Value] = dict(initial or {})

    async def get(self, key: str) -> Optional[Value]:
        return self._data.get(key)

    async def set(self, key: str, value: Value) -> None:
        self._check_value(key, value)
        self._data[key] = value

    def snapshot(self) -> Dict[str, Value]:
        return dict(self._data)


class JsonFileKeyValueStore(KeyValueStore):
    """Store persisted to a single JSON file"""

    def __init__(self, path: Path):
        self.path = Path(path)
        self._data: Optional[Dict[str, Value]] = None
        self._load_lock = asyncio.Lock()
        self._write_lock = asyncio.Lock()
        self._version = 0
        self._flushed_version = 0

    async def _ensure_loaded(self) -> Dict[str, Value]:
        if self._data is None:
            async with self._load_lock:
                if self._data is None:
                    self._data = await asyncio.to_thread(self._read)
        return self._data

    def _read(self) -> Dict[str, Value]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read preferences file {self.path}, starting empty: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Preferences file {self.path} is not a JSON object, starting empty")
            return {}
        return data

    def _write(self, snapshot: Dict[str, Value]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        tmp_path.write_text(json.dumps(snapshot, ensure_ascii=False, indent=2), encoding="utf-8")
        os.replace(tmp_path, self.path)

    async def get(self, key: str) -> Optional[Value]:
        data = await self._ensure_loaded()
        return data.get(key)

    async def set(self, key: str, value: Value) -> None:
        self._check_value(key, value)
        data = await self._ensure_loaded()
        data[key] = value
        self._version += 1
        version = self._version

        async with self._write_lock:
            # A later set() already flushed a snapshot containing this value
            if self._flushed_version >= version:
                return
            target = self._version
            snapshot = dict(data)
            try:
                await asyncio.to_thread(self._write, snapshot)
            except OSError as e:
                raise wrap_storage_exception(e, operation="write_preferences", key=key)
            self._flushed_version = target
            logger.debug(f"Flushed preferences (version {target}) to {self.path}")
