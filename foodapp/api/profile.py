"""Profile calls for the logged-in user."""

from typing import Any, Optional, Union

from foodapp.schemas import ProfileUpdate
from foodapp.services.gateway import ApiGateway, get_gateway


async def fetch_profile(gateway: Optional[ApiGateway] = None) -> Any:
    gateway = gateway or get_gateway()
    return await gateway.call("/users/profile")


async def update_profile(
    data: Union[ProfileUpdate, dict],
    gateway: Optional[ApiGateway] = None,
) -> Any:
    gateway = gateway or get_gateway()
    return await gateway.call("/users/profile", method="PUT", body=data)
