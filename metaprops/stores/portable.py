"""
Property store built in-process from file system information and embedded tags
"""

import logging
import os
from typing import Any, Dict, Optional

from ..core.exceptions import PropertyStoreOpenError
from ..core.keys import PropertyKey
from .base import PropertyStore
from .extractors import extract_properties

logger = logging.getLogger(__name__)


class FilePropertyStore(PropertyStore):
    """Windows-compatible property collection for any platform.

    Keys are the ones the Windows Property System uses for the same
    information, so the schema and the output match across platforms.
    """

    def __init__(self, file_path: str, values: Dict[PropertyKey, Any]):
        self.file_path = file_path
        self._values: Optional[Dict[PropertyKey, Any]] = values
        self._keys = list(values)

    @classmethod
    def open(cls, file_path: str) -> "FilePropertyStore":
        try:
            stat_info = os.stat(file_path)
        except OSError as e:
            raise PropertyStoreOpenError(file_path, e) from e

        values: Dict[PropertyKey, Any] = {}
        for key, value in extract_properties(file_path, stat_info):
            if key in values:
                logger.debug(f"Ignoring duplicate property {key} in {file_path}")
                continue
            values[key] = value
        return cls(file_path, values)

    def _require_open(self) -> Dict[PropertyKey, Any]:
        if self._values is None:
            raise ValueError(f"property store for {self.file_path} is closed")
        return self._values

    def __len__(self) -> int:
        return len(self._require_open())

    def key_at(self, index: int) -> PropertyKey:
        self._require_open()
        return self._keys[index]

    def value_for(self, key: PropertyKey) -> Any:
        return self._require_open().get(key)

    def close(self) -> None:
        self._values = None
