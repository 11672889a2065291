"""
Session Storage Abstract Base Class

Defines the key/value contract the session store persists into.
Both MemorySessionStorage and FileSessionStorage implement these methods,
so the store behaves the same whichever backend is active.

Values are plain strings; the store handles JSON encoding of the user.

Author: Khalil Bannouri
Version: 1.0.0
"""

from abc import ABC, abstractmethod
from typing import Optional


class BaseSessionStorage(ABC):
    """
    Abstract base class for session storage backends.

    Example:
        >>> storage = MemorySessionStorage()
        >>> storage.set_item("token", "abc")
        >>> storage.get_item("token")
        'abc'
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """
        Return the name of the storage backend.

        Returns:
            str: Backend name (e.g., "memory", "file")
        """
        pass

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """
        Read a stored value.

        Args:
            key: Storage key (e.g., "token")

        Returns:
            The stored string, or None if the key is absent
        """
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove a key. Removing an absent key is a no-op."""
        pass

    def set_items(self, items: dict[str, str]) -> None:
        """
        Store several values together.

        Backends that can write atomically override this.
        """
        for key, value in items.items():
            self.set_item(key, value)

    def remove_items(self, *keys: str) -> None:
        """Remove several keys together."""
        for key in keys:
            self.remove_item(key)
