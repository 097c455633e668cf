"""
Menu Seeding Script

Fills a running server with demo categories, items and staff accounts
through the admin API, then prints the public menu.
Run from project root: python scripts/seed_menu.py

Version: 1.0.0
"""

import argparse
import asyncio
import sys
import time
from typing import Any

import httpx

# Windows event loop fix
if sys.platform == "win32":
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

# Configuration
API_BASE_URL = "http://localhost:8001"

DEMO_MENU = {
    "Pizza": {
        "description": "Stone-baked, 12 inch",
        "items": [
            {"name": "Pizza Margherita", "price": 14.99},
            {"name": "Pepperoni Pizza", "price": 16.99},
        ],
    },
    "Starters": {
        "description": "To share or not",
        "items": [
            {"name": "Caesar Salad", "price": 8.99},
            {"name": "Garlic Bread", "price": 5.99},
        ],
    },
    "Desserts": {
        "description": "",
        "items": [{"name": "Tiramisu", "price": 7.99}],
    },
    "Drinks": {
        "description": "Cold drinks",
        "items": [
            {"name": "Cola", "price": 2.5},
            {"name": "Sparkling Water", "price": 3.49},
        ],
    },
}

DEMO_USERS = [
    {"name": "Admin", "email": "admin@restaurant.com", "password": "changeme", "role": "admin"},
    {"name": "Kitchen", "email": "kitchen@restaurant.com", "password": "changeme", "role": "employee"},
]


async def seed_category(
    client: httpx.AsyncClient,
    name: str,
    spec: dict[str, Any],
) -> dict[str, Any]:
    """Create one category and its items; existing categories are skipped."""
    response = await client.post(
        f"{API_BASE_URL}/api/admin/categories",
        json={"name": name, "description": spec["description"]},
    )
    if response.status_code != 201:
        return {"category": name, "success": False, "error": response.text[:100]}

    category_id = response.json()["id"]
    created = await asyncio.gather(*[
        client.post(
            f"{API_BASE_URL}/api/admin/items",
            json={**item, "categoryId": category_id},
        )
        for item in spec["items"]
    ])
    return {
        "category": name,
        "success": True,
        "items": sum(1 for r in created if r.status_code == 201),
    }


async def seed_users(client: httpx.AsyncClient) -> int:
    created = 0
    for user in DEMO_USERS:
        response = await client.post(f"{API_BASE_URL}/api/admin/users", json=user)
        if response.status_code == 201:
            created += 1
        else:
            print(f"   ⚠️ {user['email']}: {response.json().get('detail')}")
    return created


async def run_seed(with_users: bool = True) -> bool:
    print("=" * 70)
    print("🌱 MENU SEED")
    print("=" * 70)
    print(f"🎯 Target: {API_BASE_URL}")

    start_time = time.time()
    async with httpx.AsyncClient(timeout=30.0) as client:
        response = await client.get(f"{API_BASE_URL}/health")
        if response.status_code != 200:
            print(f"❌ Health check failed: {response.text}")
            return False
        print(f"✅ Status: {response.json().get('status')}")

        results = await asyncio.gather(*[
            seed_category(client, name, spec) for name, spec in DEMO_MENU.items()
        ])
        for r in results:
            if r["success"]:
                print(f"   ✅ {r['category']}: {r['items']} items")
            else:
                print(f"   ⚠️ {r['category']}: {r['error']}")

        if with_users:
            print(f"\n👤 Users created: {await seed_users(client)}")

        menu = (await client.get(f"{API_BASE_URL}/api/menu")).json()

    print("\n" + "=" * 70)
    print(f"📋 PUBLIC MENU ({len(menu)} items)")
    print("-" * 70)
    for entry in menu:
        print(f"   {entry['category']:<12} {entry['name']:<20} ${entry['price']:.2f}")
    print("=" * 70)
    print(f"⏱️  Total Time: {round(time.time() - start_time, 2)}s")
    return True


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Menu Seeding Script")
    parser.add_argument("--base-url", default=API_BASE_URL, help="Server base URL")
    parser.add_argument("--skip-users", action="store_true", help="Do not create staff accounts")
    args = parser.parse_args()

    API_BASE_URL = args.base_url.rstrip("/")
    ok = asyncio.run(run_seed(with_users=not args.skip_users))
    sys.exit(0 if ok else 1)
