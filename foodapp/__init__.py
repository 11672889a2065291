"""
                Food App Client

Async Python client for the food ordering backend: a single API gateway
with bearer-token sessions, plus thin call wrappers for auth, restaurants,
menus, orders and user profiles.

Author: Khalil_Bannouri
Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"
__author__ = "Khalil_Bannouri"
