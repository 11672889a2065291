"""
Session Store

Holds at most one authentication token and one user snapshot, persisted
under two stable keys in an injectable storage backend.

The gateway reads the token on every request; login/register write both
keys together and logout clears both together. The store itself does not
enforce that pairing for arbitrary writes.

Reads never raise: missing or corrupt persisted data means "logged out".

Author: Khalil Bannouri
Version: 1.0.0
"""

import json
import logging
from typing import Any, Callable, Optional, Union

from pydantic import ValidationError

from foodapp.schemas import RoleEnum, Session, UserSummary
from foodapp.services.session.base import BaseSessionStorage

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"
USER_KEY = "user"

Navigator = Callable[[str], None]


def log_navigation(target: str) -> None:
    """Default navigator: there is no page to leave, so just record it."""
    logger.info(f"Navigating to {target}")


class SessionStore:
    """
    Token + user session over a storage backend.

    Attributes:
        storage: Key/value backend (memory, file)
        login_page: Navigation target after logout
        admin_role: Role string that grants admin access
        navigator: Called with login_page once per logout

    Example:
        >>> store = SessionStore(MemorySessionStorage())
        >>> store.record_login("abc", {"id": 1, "name": "Ann", "role": "admin"})
        True
        >>> store.is_admin()
        True
    """

    def __init__(
        self,
        storage: BaseSessionStorage,
        login_page: str = "login.html",
        admin_role: str = RoleEnum.ADMIN.value,
        navigator: Optional[Navigator] = None,
    ):
        self.storage = storage
        self.login_page = login_page
        self.admin_role = admin_role
        self.navigator = navigator or log_navigation

    def get_token(self) -> Optional[str]:
        """Return the stored token, or None when logged out."""
        token = self.storage.get_item(TOKEN_KEY)
        return token or None

    def is_authenticated(self) -> bool:
        """True iff a token is currently stored."""
        return self.get_token() is not None

    def get_current_user(self) -> Optional[UserSummary]:
        """
        Return the stored user profile.

        Returns:
            UserSummary, or None if absent or if the stored value is not
            a valid user object.
        """
        raw = self.storage.get_item(USER_KEY)
        if raw is None:
            return None

        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("Stored user is not valid JSON; treating as logged out")
            return None

        if not isinstance(data, dict):
            return None

        try:
            return UserSummary.model_validate(data)
        except ValidationError:
            logger.warning("Stored user has an unexpected shape; treating as logged out")
            return None

    def is_admin(self) -> bool:
        """True iff a user is stored and its role matches the admin role exactly."""
        user = self.get_current_user()
        return user is not None and user.role == self.admin_role

    def record_login(
        self,
        token: Optional[str],
        user: Optional[Union[UserSummary, dict[str, Any]]],
    ) -> bool:
        """
        Persist a token and the user it belongs to.

        Both are written together; an empty token or an absent user leaves the store
        untouched. An empty user object is still recorded.

        Args:
            token: Bearer token issued by the backend
            user: User object from the same response

        Returns:
            bool: True if the session was written
        """
        if not token or user is None:
            logger.debug("Login response missing token or user; session unchanged")
            return False

        if isinstance(user, UserSummary):
            user_json = user.model_dump_json(exclude_none=True)
        else:
            user_json = json.dumps(user)

        self.storage.set_items({TOKEN_KEY: token, USER_KEY: user_json})
        logger.info("Session recorded")
        return True

    def clear(self) -> None:
        """Remove both session keys, whichever are present."""
        self.storage.remove_items(TOKEN_KEY, USER_KEY)

    def logout(self) -> None:
        """Clear the session and navigate to the login page."""
        self.clear()
        logger.info("Logged out")
        self.navigator(self.login_page)

    def snapshot(self) -> Session:
        """Current token and user as a Session."""
        return Session(token=self.get_token(), user=self.get_current_user())
