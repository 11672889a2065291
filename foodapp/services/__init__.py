"""
                        Services Module

Client-side services behind the resource calls.

Services:
    - session: token + user store with memory/file backends
    - gateway: the single request pipeline to the backend
"""

from foodapp.services.gateway import ApiGateway, get_gateway
from foodapp.services.session import SessionStore, get_session_store

__all__ = ["ApiGateway", "get_gateway", "SessionStore", "get_session_store"]
