"""
Backend diagnostic calls.

The backend exposes a liveness route (/test) and a listing of its mounted
API routes (/debug/routes).
"""

from typing import Any, Optional

from foodapp.services.gateway import ApiGateway, get_gateway


async def ping(gateway: Optional[ApiGateway] = None) -> Any:
    """GET /test; the backend answers {"success": true, "message": ...}."""
    gateway = gateway or get_gateway()
    return await gateway.call("/test")


async def fetch_routes(gateway: Optional[ApiGateway] = None) -> list:
    """GET /debug/routes; returns the `routes` list (empty if absent)."""
    gateway = gateway or get_gateway()
    data = await gateway.call("/debug/routes")
    if isinstance(data, dict):
        return data.get("routes") or []
    return []
