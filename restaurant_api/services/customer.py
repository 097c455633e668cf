"""
Customer Service

Read-only public menu.
"""

import asyncio
from typing import Any

from restaurant_api.repositories import Repositories
from restaurant_api.services.mapping import map_public_item


class CustomerService:

    def __init__(self, repositories: Repositories):
        self.categories = repositories.categories
        self.items = repositories.items

    async def public_menu(self) -> list[dict[str, Any]]:
        """
        Every available item, labelled with its category.

        Active categories are loaded alongside the items but do not filter
        them: an available item in an inactive category is still listed.
        """
        _active_categories, rows = await asyncio.gather(
            self.categories.list_active(),
            self.items.list_available_with_category(),
        )
        return [map_public_item(item, category) for item, category in rows]
