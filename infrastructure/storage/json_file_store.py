"""
JSON-file implementation of KeyValueStore.

Stands in for device storage: a single JSON object of string keys to string
values, rewritten atomically on every change.
"""
import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional, Union

from application.exceptions import StorageError

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore:
    """
    KeyValueStore backed by one JSON file.

    The file (and its parent directory) is created on first write. A missing
    file reads as empty; a corrupt file raises StorageError.
    """

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def get_item(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = str(value)
        self._write(data)

    def remove_item(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)

    def _read(self) -> Dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8") or "{}")
        except (OSError, ValueError) as e:
            raise StorageError(f"Failed to read {self._path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageError(f"Unexpected storage format in {self._path}")
        return data

    def _write(self, data: Dict[str, str]) -> None:
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(data, indent=2, sort_keys=True), encoding="utf-8")
            os.replace(tmp_path, self._path)
        except OSError as e:
            raise StorageError(f"Failed to write {self._path}: {e}") from e
        logger.debug(f"Wrote {len(data)} key(s) to {self._path}")
