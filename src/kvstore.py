"""Local key-value stores backing the planner.

The planner only needs ``get``/``set``/``delete`` of named byte entries.
``JsonFileStore`` keeps every entry in one pretty-printed JSON file so saved
state stays human-inspectable; ``MemoryStore`` is for tests.
"""
from __future__ import annotations
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Protocol, Union

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[bytes]: ...

    def set(self, key: str, value: bytes) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryStore:
    def __init__(self, initial: Optional[Dict[str, bytes]] = None):
        self.data: Dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> Optional[bytes]:
        return self.data.get(key)

    def set(self, key: str, value: bytes) -> None:
        self.data[key] = bytes(value)

    def delete(self, key: str) -> None:
        self.data.pop(key, None)


class JsonFileStore:
    """Entries stored as ``{name: text}`` in a single UTF-8 JSON file.

    Missing file -> empty store. A corrupt file is logged and treated as
    empty; it is only overwritten on the next ``set``/``delete``.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read %s (%s); treating as empty", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Unexpected top-level JSON in %s; treating as empty", self.path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, entries: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=str(self.path.parent), prefix=self.path.name, suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(entries, f, indent=4, ensure_ascii=False)
            os.replace(tmp, self.path)
        except BaseException:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise

    def get(self, key: str) -> Optional[bytes]:
        value = self._read_all().get(key)
        return None if value is None else value.encode('utf-8')

    def set(self, key: str, value: bytes) -> None:
        entries = self._read_all()
        entries[key] = value.decode('utf-8')
        self._write_all(entries)

    def delete(self, key: str) -> None:
        entries = self._read_all()
        if entries.pop(key, None) is not None:
            self._write_all(entries)
