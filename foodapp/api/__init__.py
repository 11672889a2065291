"""
Resource Call Surface

Thin named calls for each backend resource family. Every call accepts an
optional `gateway=`; without it the cached gateway is used.

Usage:
    from foodapp import api

    await api.login_user("ann@example.com", "secret")
    restaurants = await api.fetch_restaurants()
"""

from foodapp.api.auth import (
    register_user,
    login_user,
    logout,
    is_authenticated,
    get_current_user,
    is_admin,
)
from foodapp.api.restaurants import (
    fetch_restaurants,
    fetch_restaurant,
    create_restaurant,
    delete_restaurant,
)
from foodapp.api.menu import fetch_menu, create_menu_item, delete_menu_item
from foodapp.api.orders import create_order, fetch_my_orders
from foodapp.api.profile import fetch_profile, update_profile
from foodapp.api.system import ping, fetch_routes

__all__ = [
    "register_user",
    "login_user",
    "logout",
    "is_authenticated",
    "get_current_user",
    "is_admin",
    "fetch_restaurants",
    "fetch_restaurant",
    "create_restaurant",
    "delete_restaurant",
    "fetch_menu",
    "create_menu_item",
    "delete_menu_item",
    "create_order",
    "fetch_my_orders",
    "fetch_profile",
    "update_profile",
    "ping",
    "fetch_routes",
]
