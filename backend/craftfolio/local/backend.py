"""
Wiring for the local mock backend.
"""
from typing import Optional
from craftfolio.core.config import settings
from craftfolio.local.projects import LocalProjectCatalog
from craftfolio.local.session import LocalSession
from craftfolio.local.store import FileStore, KeyValueStore, MemoryStore
from craftfolio.local.users import LocalUserDirectory


class LocalBackend:
    """One store, one session, and the two services over them."""

    def __init__(self, store: KeyValueStore):
        self.store = store
        self.session = LocalSession(store)
        self.users = LocalUserDirectory(store, self.session)
        self.projects = LocalProjectCatalog(store)


def open_local_backend(directory: Optional[str] = None, in_memory: bool = False) -> LocalBackend:
    """Open a backend persisted under ``directory`` (or the configured one)."""
    if in_memory:
        return LocalBackend(MemoryStore())
    return LocalBackend(FileStore(directory or settings.LOCAL_STORE_DIR))
