"""Restaurant calls: list, fetch, create (admin), delete (admin)."""

from typing import Any, Optional, Union

from foodapp.schemas import RestaurantCreate
from foodapp.services.gateway import ApiGateway, get_gateway


async def fetch_restaurants(gateway: Optional[ApiGateway] = None) -> Any:
    gateway = gateway or get_gateway()
    return await gateway.call("/restaurants")


async def fetch_restaurant(
    restaurant_id: Union[str, int],
    gateway: Optional[ApiGateway] = None,
) -> Any:
    gateway = gateway or get_gateway()
    return await gateway.call(f"/restaurants/{restaurant_id}")


async def create_restaurant(
    data: Union[RestaurantCreate, dict],
    gateway: Optional[ApiGateway] = None,
) -> Any:
    gateway = gateway or get_gateway()
    return await gateway.call("/restaurants", method="POST", body=data)


async def delete_restaurant(
    restaurant_id: Union[str, int],
    gateway: Optional[ApiGateway] = None,
) -> Any:
    gateway = gateway or get_gateway()
    return await gateway.call(f"/restaurants/{restaurant_id}", method="DELETE")
