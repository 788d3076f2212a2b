from __future__ import annotations

import os
import re
import tempfile
from pathlib import Path
from typing import Optional

from ..core.exceptions import PersistenceError

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class FileBlobRepository:
    """One JSON file per key inside `directory`.

    Writes go to a temp file in the same directory and are swapped in with
    os.replace, so a reader sees either the old or the new blob.
    """

    def __init__(self, directory: str | Path):
        self._directory = Path(directory)

    def _path_for(self, key: str) -> Path:
        if not _SAFE_KEY.match(key):
            raise PersistenceError(f"Invalid storage key: {key!r}")
        return self._directory / f"{key}.json"

    def read(self, key: str) -> Optional[str]:
        path = self._path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(f"Cannot read {path}: {e}") from e

    def write(self, key: str, value: str) -> None:
        path = self._path_for(key)
        tmp_name = None
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{key}.", suffix=".tmp", dir=self._directory)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, path)
            tmp_name = None
        except OSError as e:
            raise PersistenceError(f"Cannot write {path}: {e}") from e
        finally:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
