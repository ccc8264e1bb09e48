# 📄 File: garden_assistant/shared/infrastructure/storage/key_value_storage.py

# 🧭 Purpose (Layman Explanation):
# A tiny "notebook" on the user's own computer where the assistant writes down small pieces
# of text under a name (like the list of watering reminders) and reads them back later.

# 🧪 Purpose (Technical Summary):
# Synchronous string key-value storage with an in-memory implementation and a
# file-backed implementation (one file per key, atomic replace on write). This is
# the local analogue of browser localStorage; callers own serialization.

# 🔗 Dependencies:
# - pathlib / os for file handling
# - garden_assistant.shared.core.exceptions (StorageError, CorruptedDataError)

# 🔄 Connected Modules / Calls From:
# Used by: ReminderStore, service wiring in shared.core.dependencies, health checks

import os
import re
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Union

from garden_assistant.shared.core.exceptions import CorruptedDataError, StorageError
from garden_assistant.shared.utils.logging import get_logger

logger = get_logger(__name__)

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class KeyValueStorage(ABC):
    """
    Contract for string key-value storage.

    Values are opaque strings; a missing key reads as None. Writes replace the
    whole value for the key.
    """

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """
        Return the stored value or None when the key is absent.

        Raises CorruptedDataError when a value exists but cannot be decoded.
        """

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove key. Removing a missing key is a no-op."""

    def is_writable(self) -> bool:
        return True


class InMemoryKeyValueStorage(KeyValueStorage):
    """Process-local storage, used for tests and ephemeral sessions."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class FileKeyValueStorage(KeyValueStorage):
    """
    Storage backed by a directory on local disk.

    Each key lives in its own `<key>.json` file. Writes go to a temporary file
    in the same directory and are moved into place with os.replace, so a reader
    never observes a half-written value.
    """

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)

    def _path_for(self, key: str) -> Path:
        if not _SAFE_KEY.match(key):
            raise StorageError(f"Invalid storage key: {key!r}", key=key, operation="resolve")
        return self.directory / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self._path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except UnicodeDecodeError as e:
            logger.warning(f"Storage key {key} is not valid UTF-8: {e}", extra={"path": str(path)})
            raise CorruptedDataError(f"Storage key {key} holds undecodable data", key=key, operation="read")
        except OSError as e:
            logger.error(f"Failed to read storage key {key}: {e}", extra={"path": str(path)})
            raise StorageError(f"Failed to read storage key {key}", key=key, operation="read")

    def set_item(self, key: str, value: str) -> None:
        path = self._path_for(key)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as tmp_file:
                    tmp_file.write(value)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.error(f"Failed to write storage key {key}: {e}", extra={"path": str(path)})
            raise StorageError(f"Failed to write storage key {key}", key=key, operation="write")

        logger.debug(f"Stored key {key}", extra={"path": str(path), "size": len(value)})

    def remove_item(self, key: str) -> None:
        path = self._path_for(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.error(f"Failed to remove storage key {key}: {e}", extra={"path": str(path)})
            raise StorageError(f"Failed to remove storage key {key}", key=key, operation="remove")

    def is_writable(self) -> bool:
        if self.directory.exists():
            return os.access(self.directory, os.W_OK)
        parent = self.directory.parent
        return parent.exists() and os.access(parent, os.W_OK)


def create_storage(directory: Optional[Union[str, Path]] = None) -> KeyValueStorage:
    """Build the storage backend: file-backed when a directory is given, in-memory otherwise."""
    if directory is None:
        return InMemoryKeyValueStorage()
    return FileKeyValueStorage(directory)
