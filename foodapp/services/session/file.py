"""
File Session Storage with Concurrency Control

Persists session keys in a small JSON document so a session survives
process restarts. Every read and write holds a FileLock, and writes go
through a temporary file plus os.replace, so readers never see a
half-written document.

Reads never raise: a missing, unreadable or corrupt file reads as empty.
Writes that cannot complete are logged and raised.

Author: Khalil Bannouri
Version: 1.0.0
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional, Union

from filelock import FileLock, Timeout

from foodapp.services.session.base import BaseSessionStorage

logger = logging.getLogger(__name__)


class FileSessionStorage(BaseSessionStorage):
    """
    JSON-file session storage.

    Attributes:
        path: Session document location
        lock_timeout: Seconds to wait for the file lock

    Example:
        >>> storage = FileSessionStorage("data/session.json")
        >>> storage.set_item("token", "abc")
        >>> FileSessionStorage("data/session.json").get_item("token")
        'abc'
    """

    def __init__(self, path: Union[str, Path], lock_timeout: int = 10):
        self.path = Path(path)
        self.lock_timeout = lock_timeout
        self._lock = FileLock(str(self.path) + ".lock", timeout=lock_timeout)

        logger.info(f"FileSessionStorage initialized ({self.path})")

    @property
    def provider_name(self) -> str:
        return "file"

    def _ensure_data_dir(self) -> None:
        """Create the parent directory if needed."""
        if not self.path.parent.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
            logger.info(f"Created session directory: {self.path.parent}")

    def _read(self) -> dict[str, str]:
        """Load the document. Caller holds the lock."""
        if not self.path.exists():
            return {}

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Error reading {self.path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring malformed session file {self.path}")
            return {}

        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _write(self, data: dict[str, str]) -> None:
        """Replace the document. Caller holds the lock."""
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        tmp_path.write_text(json.dumps(data), encoding="utf-8")
        os.replace(tmp_path, self.path)

    def _update(self, changes: dict[str, Optional[str]]) -> None:
        """Apply sets (str) and removals (None) under one lock."""
        self._ensure_data_dir()

        try:
            with self._lock:
                data = self._read()
                for key, value in changes.items():
                    if value is None:
                        data.pop(key, None)
                    else:
                        data[key] = value
                self._write(data)
        except Timeout:
            logger.error(f"Lock timeout ({self.lock_timeout}s) on {self.path}")
            raise

    def get_item(self, key: str) -> Optional[str]:
        if not self.path.exists():
            return None

        try:
            with self._lock:
                return self._read().get(key)
        except Timeout:
            logger.error(f"Lock timeout ({self.lock_timeout}s) reading {self.path}")
            return None

    def set_item(self, key: str, value: str) -> None:
        self._update({key: value})

    def remove_item(self, key: str) -> None:
        self._update({key: None})

    def set_items(self, items: dict[str, str]) -> None:
        self._update(dict(items))

    def remove_items(self, *keys: str) -> None:
        self._update({key: None for key in keys})

    def clear(self) -> None:
        """Delete the session document and its lock file."""
        for f in [self.path, Path(self._lock.lock_file)]:
            if f.exists():
                f.unlink()
        logger.info(f"Session file cleared: {self.path}")
