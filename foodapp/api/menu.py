"""Menu calls: a restaurant's menu, plus item create/delete (admin)."""

from typing import Any, Optional, Union

from foodapp.schemas import MenuItemCreate
from foodapp.services.gateway import ApiGateway, get_gateway


async def fetch_menu(
    restaurant_id: Union[str, int],
    gateway: Optional[ApiGateway] = None,
) -> Any:
    gateway = gateway or get_gateway()
    return await gateway.call(f"/menu/{restaurant_id}")


async def create_menu_item(
    data: Union[MenuItemCreate, dict],
    gateway: Optional[ApiGateway] = None,
) -> Any:
    gateway = gateway or get_gateway()
    return await gateway.call("/menu", method="POST", body=data)


async def delete_menu_item(
    item_id: Union[str, int],
    gateway: Optional[ApiGateway] = None,
) -> Any:
    gateway = gateway or get_gateway()
    return await gateway.call(f"/menu/{item_id}", method="DELETE")
