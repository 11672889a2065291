"""
Customer Concurrency Simulation

Runs many simulated customers against a running backend at once. Each
customer has its own session and gateway: register (or log in), browse
restaurants, read a menu, place an order and list their orders.

Run from project root: python scripts/simulate.py --customers 20

Author: Khalil_Bannouri
Version: 1.0.0
"""

import asyncio
import sys
import os
import random
import time
import uuid
import argparse
from datetime import datetime
from typing import Any, Optional

import httpx
from pydantic import ValidationError

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from foodapp import api
from foodapp.core.config import get_settings, setup_logging
from foodapp.core.exceptions import RequestError
from foodapp.schemas import OrderCreate, OrderItemCreate, RegisterRequest
from foodapp.services.gateway import ApiGateway
from foodapp.services.session import MemorySessionStorage, SessionStore

# Windows event loop fix
if sys.platform == "win32":
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

TOTAL_CUSTOMERS = 20

FIRST_NAMES = ["John", "Jane", "Mike", "Sarah", "Tom", "Emma", "David", "Lisa", "Chris", "Amy"]
LAST_NAMES = ["Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis", "Wilson", "Taylor"]
STREETS = ["Main St", "Broadway", "5th Avenue", "Park Ave", "Madison Ave", "Lexington Ave", "Amsterdam Ave"]


def generate_random_customer() -> RegisterRequest:
    """Generate random registration fields."""
    first = random.choice(FIRST_NAMES)
    last = random.choice(LAST_NAMES)
    return RegisterRequest(
        name=f"{first} {last}",
        email=f"{first.lower()}.{last.lower()}.{uuid.uuid4().hex[:8]}@example.com",
        password=uuid.uuid4().hex,
        phone=f"555-{random.randint(100,999)}-{random.randint(1000,9999)}",
        address=f"{random.randint(1, 999)} {random.choice(STREETS)}",
    )


def as_list(payload: Any, *keys: str) -> list:
    """Pull a list out of a payload that is either a list or wraps one."""
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for key in keys:
            value = payload.get(key)
            if isinstance(value, list):
                return value
    return []


def entity_id(entity: dict) -> Optional[str]:
    value = entity.get("_id") or entity.get("id")
    return str(value) if value is not None else None


def is_orderable_price(value: Any) -> bool:
    """Positive int or float; bools are not prices."""
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0


def build_order(restaurant_id: str, menu_items: list[dict]) -> Optional[OrderCreate]:
    """Pick 1-3 priced menu items for an order."""
    priced = [m for m in menu_items if entity_id(m) and is_orderable_price(m.get("price"))]
    if not priced:
        return None

    lines = [
        OrderItemCreate(
            menuItem=entity_id(item),
            name=item.get("name"),
            price=item["price"],
            quantity=random.randint(1, 3),
        )
        for item in random.sample(priced, k=min(len(priced), random.randint(1, 3)))
    ]
    order = OrderCreate(
        restaurant=restaurant_id,
        items=lines,
        deliveryAddress=f"{random.randint(1, 999)} {random.choice(STREETS)}",
    )
    order.totalAmount = order.computed_total
    return order


# =============================================================================
# CUSTOMER FLOW
# =============================================================================

async def run_customer(
    base_url: str,
    customer_num: int,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> dict[str, Any]:
    """Run one customer's flow in its own session."""
    store = SessionStore(MemorySessionStorage())
    start_time = time.time()
    result: dict[str, Any] = {"customer_num": customer_num, "success": False}

    async with ApiGateway(base_url, store, transport=transport) as gateway:
        try:
            customer = generate_random_customer()
            await api.register_user(customer, gateway=gateway)
            if not store.is_authenticated():
                await api.login_user(customer.email, customer.password, gateway=gateway)

            restaurants = as_list(await api.fetch_restaurants(gateway=gateway), "restaurants", "data")
            if not restaurants:
                result["error"] = "No restaurants available"
                return result

            restaurant_id = entity_id(random.choice(restaurants))
            menu = as_list(await api.fetch_menu(restaurant_id, gateway=gateway), "menu", "items", "data")
            order = build_order(restaurant_id, menu)
            if order is None:
                result["error"] = f"No priced menu items for restaurant {restaurant_id}"
                return result

            await api.create_order(order, gateway=gateway)
            my_orders = as_list(await api.fetch_my_orders(gateway=gateway), "orders", "data")

            result.update(
                success=True,
                total=order.totalAmount or 0.0,
                orders_seen=len(my_orders),
            )
        except RequestError as e:
            result["error"] = f"[{e.kind.value if e.kind else 'error'}] {e.message}"[:100]
        except ValidationError as e:
            result["error"] = f"[invalid data] {e.errors()[0]['msg']}"[:100]
        finally:
            result["time"] = round(time.time() - start_time, 3)

    return result


# =============================================================================
# MAIN SIMULATION RUNNER
# =============================================================================

async def run_simulation(
    base_url: str,
    num_customers: int = TOTAL_CUSTOMERS,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> dict[str, Any]:
    """
    Run all customers concurrently.

    Args:
        base_url: Backend base URL
        num_customers: Number of simulated customers
        transport: Optional httpx transport shared by every customer
    """
    print("=" * 70)
    print("🔥 CUSTOMER SIMULATION - CONCURRENT SESSIONS")
    print("=" * 70)
    print(f"👥 Customers: {num_customers}")
    print(f"🎯 Target: {base_url}")
    print(f"⏰ Started: {datetime.now().strftime('%H:%M:%S')}")
    print("=" * 70)

    start_time = time.time()
    results = await asyncio.gather(
        *[run_customer(base_url, i + 1, transport) for i in range(num_customers)]
    )
    total_time = round(time.time() - start_time, 2)

    successful = [r for r in results if r["success"]]
    failed = [r for r in results if not r["success"]]

    print("\n" + "=" * 70)
    print("📊 SIMULATION RESULTS")
    print("=" * 70)
    print(f"\n✅ Successful Customers: {len(successful)}/{num_customers}")
    print(f"❌ Failed Customers: {len(failed)}/{num_customers}")
    print(f"⏱️  Total Time: {total_time}s")

    if successful:
        avg_time = round(sum(r["time"] for r in successful) / len(successful), 3)
        total_revenue = sum(r.get("total", 0) for r in successful)
        print(f"\n📈 Performance Metrics:")
        print(f"   Average Flow: {avg_time}s")
        print(f"   Fastest: {min(r['time'] for r in successful)}s")
        print(f"   Slowest: {max(r['time'] for r in successful)}s")
        print(f"   💰 Total Ordered: ${total_revenue:.2f}")

    if failed:
        print(f"\n⚠️  Failure Details (showing first 5):")
        for f in failed[:5]:
            print(f"   Customer #{f['customer_num']}: {f.get('error', 'Unknown error')}")

    print("=" * 70)

    return {
        "total": num_customers,
        "successful": len(successful),
        "failed": len(failed),
        "total_time": total_time,
        "results": results,
    }


async def preflight(base_url: str) -> bool:
    """Check the backend is up and list its routes."""
    print("\n🧪 PRE-FLIGHT")
    async with ApiGateway(base_url, SessionStore(MemorySessionStorage())) as gateway:
        if not await gateway.health_check():
            print(f"   ❌ Backend not reachable at {base_url}")
            return False
        print("   ✅ Backend reachable")
        for route in await api.fetch_routes(gateway=gateway):
            print(f"   {route.get('path')}: {route.get('methods')}")
    return True


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Customer Concurrency Simulation")
    parser.add_argument("--customers", type=int, default=TOTAL_CUSTOMERS, help="Number of customers")
    parser.add_argument("--base-url", default=None, help="Backend base URL (default: from settings)")
    parser.add_argument("--skip-preflight", action="store_true", help="Skip the pre-flight check")
    args = parser.parse_args()

    setup_logging()
    base_url = args.base_url or get_settings().api_base

    if not args.skip_preflight and not asyncio.run(preflight(base_url)):
        sys.exit(1)

    summary = asyncio.run(run_simulation(base_url, args.customers))
    sys.exit(0 if summary["failed"] == 0 else 1)
