"""
Auth Calls and Session Helpers

register_user / login_user go through the gateway and, when the backend
answers with both a token and a user object, record them in the gateway's
session store. The remaining helpers read or clear the shared session.

Author: Khalil Bannouri
Version: 1.0.0
"""

import logging
from typing import Any, Optional, Union

from pydantic import ValidationError

from foodapp.schemas import AuthResponse, LoginRequest, RegisterRequest, UserSummary
from foodapp.services.gateway import ApiGateway, get_gateway
from foodapp.services.session import SessionStore, get_session_store

logger = logging.getLogger(__name__)


def _record_session(store: SessionStore, payload: Any) -> bool:
    """Store token + user from an auth payload; anything incomplete is ignored."""
    try:
        auth = AuthResponse.model_validate(payload)
    except ValidationError:
        logger.debug("Auth response has no token/user pair; session unchanged")
        return False
    return store.record_login(auth.token, auth.user)


async def register_user(
    user_data: Union[RegisterRequest, dict],
    gateway: Optional[ApiGateway] = None,
) -> Any:
    """POST /auth/register; records the session if the backend logs the user in."""
    gateway = gateway or get_gateway()
    res = await gateway.call("/auth/register", method="POST", body=user_data)
    _record_session(gateway.session_store, res)
    return res


async def login_user(
    email: str,
    password: str,
    gateway: Optional[ApiGateway] = None,
) -> Any:
    """
    POST /auth/login with email and password.

    Returns:
        The backend payload, unchanged

    Raises:
        RequestError: If the backend rejects the credentials
    """
    gateway = gateway or get_gateway()
    res = await gateway.call(
        "/auth/login",
        method="POST",
        body=LoginRequest(email=email, password=password),
    )
    _record_session(gateway.session_store, res)
    return res


def logout(store: Optional[SessionStore] = None) -> None:
    """Clear token and user, then navigate to the login page."""
    (store or get_session_store()).logout()


def is_authenticated(store: Optional[SessionStore] = None) -> bool:
    return (store or get_session_store()).is_authenticated()


def get_current_user(store: Optional[SessionStore] = None) -> Optional[UserSummary]:
    return (store or get_session_store()).get_current_user()


def is_admin(store: Optional[SessionStore] = None) -> bool:
    return (store or get_session_store()).is_admin()
