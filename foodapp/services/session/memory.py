"""
In-Memory Session Storage

Dict-backed storage used in development and tests. Nothing survives
the process.
"""

import logging
from typing import Optional

from foodapp.services.session.base import BaseSessionStorage

logger = logging.getLogger(__name__)


class MemorySessionStorage(BaseSessionStorage):
    """Session storage kept in a plain dict."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._items: dict[str, str] = dict(initial or {})
        logger.debug("MemorySessionStorage initialized")

    @property
    def provider_name(self) -> str:
        return "memory"

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def __len__(self) -> int:
        return len(self._items)
