from __future__ import annotations

from typing import Optional, Protocol


class BlobRepository(Protocol):
    """Opaque key/value blob storage.

    Implementations raise PersistenceError on any I/O failure and must never
    expose a partially written value to readers.
    """

    def read(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def write(self, key: str, value: str) -> None:
        raise NotImplementedError
