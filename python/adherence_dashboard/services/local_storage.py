"""
Local Storage for the Patient Adherence Dashboard

A small string key/value store persisted to one JSON file, with the same
getItem/setItem semantics as browser local storage. Anything written here can
be lost if the file is removed; no durability beyond that is promised.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Union

logger = logging.getLogger(__name__)

class StorageError(ValueError):
    """The storage file exists but cannot be read as a key/value object"""

class LocalStorage:
    """JSON-file backed key/value storage"""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def get_item(self, key: str) -> Optional[str]:
        """
        Return the stored string for key, or None when absent

        Raises:
            StorageError: the storage file is corrupt
        """
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        """Store value under key, rewriting the backing file"""
        data = self._read_for_update()
        data[key] = str(value)
        self._write(data)
        logger.debug(f"Stored {len(data[key])} characters under '{key}'")

    def remove_item(self, key: str) -> None:
        data = self._read_for_update()
        if key in data:
            del data[key]
            self._write(data)

    def clear(self) -> None:
        self._write({})
        logger.info(f"Local storage cleared: {self.path}")

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError(f"Unreadable storage file {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise StorageError(f"Storage file {self.path} does not hold a key/value object")

        return data

    @property
    def backup_path(self) -> Path:
        """Where a corrupt storage file is moved before it is rewritten"""
        return self.path.with_name(self.path.name + ".corrupt")

    def _read_for_update(self) -> Dict[str, str]:
        try:
            return self._read()
        except StorageError as e:
            os.replace(self.path, self.backup_path)
            logger.warning(f"{e}; moved to {self.backup_path} and starting fresh")
            return {}

    def _write(self, data: Dict[str, str]) -> None:
        directory = self.path.parent
        directory.mkdir(parents=True, exist_ok=True)

        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(data, f)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
