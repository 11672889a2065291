"""
Session Store Factory

Provides a single entry point for obtaining the process-wide session store.
The storage backend is chosen from the SESSION_BACKEND setting.

Usage:
    from foodapp.services.session import get_session_store

    store = get_session_store()
    if store.is_authenticated():
        ...

Backend Switching:
    - SESSION_BACKEND=memory → MemorySessionStorage (lost on exit)
    - SESSION_BACKEND=file → FileSessionStorage (SESSION_FILE)

Author: Khalil Bannouri
Version: 1.0.0
"""

import logging
from functools import lru_cache

from foodapp.core.config import SessionBackend, get_settings
from foodapp.services.session.base import BaseSessionStorage
from foodapp.services.session.file import FileSessionStorage
from foodapp.services.session.memory import MemorySessionStorage
from foodapp.services.session.store import (
    SessionStore,
    TOKEN_KEY,
    USER_KEY,
    log_navigation,
)

logger = logging.getLogger(__name__)


def create_session_storage() -> BaseSessionStorage:
    """
    Build the storage backend selected by configuration.

    Returns:
        BaseSessionStorage: Configured storage backend
    """
    settings = get_settings()

    if settings.session_backend == SessionBackend.FILE:
        logger.info(f"Session Storage: Using FileSessionStorage ({settings.session_file})")
        return FileSessionStorage(
            settings.session_file,
            lock_timeout=settings.session_lock_timeout,
        )

    logger.info("Session Storage: Using MemorySessionStorage")
    return MemorySessionStorage()


@lru_cache()
def get_session_store() -> SessionStore:
    """
    Get the process-wide session store.

    The instance is cached so the gateway and the auth helpers
    share one store.

    Returns:
        SessionStore: Configured session store
    """
    settings = get_settings()
    return SessionStore(
        create_session_storage(),
        login_page=settings.login_page,
        admin_role=settings.admin_role,
    )


def reset_session_store() -> None:
    """
    Clear the cached session store instance.

    Useful for testing or when configuration changes at runtime.
    The persisted data itself is not touched.
    """
    get_session_store.cache_clear()
    logger.debug("Session store cache cleared")


__all__ = [
    "get_session_store",
    "reset_session_store",
    "create_session_storage",
    "SessionStore",
    "BaseSessionStorage",
    "MemorySessionStorage",
    "FileSessionStorage",
    "TOKEN_KEY",
    "USER_KEY",
    "log_navigation",
]
