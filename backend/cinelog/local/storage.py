import os
import tempfile
from pathlib import Path
from typing import Protocol
from urllib.parse import quote

__all__ = [
    "Storage",
    "MemoryStorage",
    "FileStorage",
]


class Storage(Protocol):
    """
    A textual key-value medium scoped to one browser, with the same contract
    as the browser's local storage.
    """

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...

    def clear(self) -> None: ...


class MemoryStorage:
    def __init__(self, items: dict[str, str] | None = None):
        self._items: dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def clear(self) -> None:
        self._items.clear()


class FileStorage:
    """
    Storage backed by a directory, one file per key.

    Reads of a missing key return None; any other I/O error propagates.
    """

    def __init__(self, directory: Path | str):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{quote(key, safe='')}.json"

    def get_item(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        # One temp file per write; the last replace wins.
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=self.directory, suffix=".tmp", delete=False
        ) as tmp:
            tmp.write(value)
        try:
            os.replace(tmp.name, self._path(key))
        except OSError:
            Path(tmp.name).unlink(missing_ok=True)
            raise

    def remove_item(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)

    def clear(self) -> None:
        if not self.directory.exists():
            return
        for path in self.directory.glob("*.json"):
            path.unlink(missing_ok=True)
