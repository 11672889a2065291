"""Order calls for the logged-in customer."""

from typing import Any, Optional, Union

from foodapp.schemas import OrderCreate
from foodapp.services.gateway import ApiGateway, get_gateway


async def create_order(
    order_data: Union[OrderCreate, dict],
    gateway: Optional[ApiGateway] = None,
) -> Any:
    gateway = gateway or get_gateway()
    return await gateway.call("/orders", method="POST", body=order_data)


async def fetch_my_orders(gateway: Optional[ApiGateway] = None) -> Any:
    gateway = gateway or get_gateway()
    return await gateway.call("/orders/my-orders")
