"""
Durable key-value stores for the local mock backend.

Each slot holds a JSON document. Callers read the whole collection, mutate
it in memory and write it back; the last write wins.
"""
import json
import logging
import os
import re
import tempfile
from typing import Any, Dict, Optional
from craftfolio.core.utils import serialize_date

logger = logging.getLogger(__name__)

USERS_KEY = "users"
CURRENT_USER_KEY = "current_user"
PROJECTS_KEY = "projects"
TOKEN_KEY = "token"

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


class KeyValueStore:
    """Byte-string slots addressed by name."""

    def get(self, key: str) -> Optional[bytes]:
        raise NotImplementedError

    def set(self, key: str, value: bytes) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError

    def read_json(self, key: str, default: Any = None) -> Any:
        raw = self.get(key)
        if raw is None:
            return default
        try:
            return json.loads(raw.decode("utf-8"))
        except ValueError:
            logger.warning(f"Discarding unreadable value in slot '{key}'")
            return default

    def write_json(self, key: str, value: Any) -> None:
        self.set(key, json.dumps(value, default=serialize_date).encode("utf-8"))


class MemoryStore(KeyValueStore):
    """In-process store; one instance per client or test."""

    def __init__(self, initial: Optional[Dict[str, bytes]] = None):
        self._data: Dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> Optional[bytes]:
        return self._data.get(key)

    def set(self, key: str, value: bytes) -> None:
        self._data[key] = bytes(value)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class FileStore(KeyValueStore):
    """Store that keeps one file per slot inside a directory."""

    def __init__(self, directory: str):
        self.directory = directory
        os.makedirs(directory, exist_ok=True)

    def _path(self, key: str) -> str:
        if not _KEY_PATTERN.match(key):
            raise ValueError(f"Invalid store key: {key!r}")
        return os.path.join(self.directory, f"{key}.json")

    def get(self, key: str) -> Optional[bytes]:
        path = self._path(key)
        if not os.path.exists(path):
            return None
        with open(path, "rb") as f:
            return f.read()

    def set(self, key: str, value: bytes) -> None:
        path = self._path(key)
        fd, tmp_path = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(value)
            os.replace(tmp_path, path)
        except OSError:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def remove(self, key: str) -> None:
        path = self._path(key)
        if os.path.exists(path):
            os.remove(path)
