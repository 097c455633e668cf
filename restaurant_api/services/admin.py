"""
Admin Service

Back-office CRUD over categories, menu items and users.

Uniqueness of category names and user emails is a lookup followed by an
insert, with no lock in between: two concurrent creates with the same value
can both succeed. Deleting a category removes the category first and its
items second, in separate statements; a failure between the two leaves the
items orphaned (they then show up as "Uncategorized" on the public menu).
"""

import asyncio
import logging
from typing import Any, Optional

from restaurant_api.core.errors import ConflictError, NotFound, ValidationError
from restaurant_api.core.security import MAX_PASSWORD_BYTES, password_too_long
from restaurant_api.models import (
    Category,
    MenuItem,
    User,
    UserRole,
    new_category,
    new_menu_item,
    new_user,
    normalize_email,
)
from restaurant_api.repositories import Repositories
from restaurant_api.schemas import (
    CategoryCreate,
    CategoryUpdate,
    MenuItemCreate,
    MenuItemUpdate,
    UserCreate,
    UserUpdate,
)
from restaurant_api.services.mapping import map_category, map_item, map_user

logger = logging.getLogger(__name__)

VALID_ROLES = [role.value for role in UserRole]


def _required_text(value: Optional[str], field: str) -> str:
    value = (value or "").strip()
    if not value:
        raise ValidationError(f"{field} is required")
    return value


def _password(value: str) -> str:
    if password_too_long(value):
        raise ValidationError(f"password cannot be longer than {MAX_PASSWORD_BYTES} bytes")
    return value


def _role(value: str) -> UserRole:
    try:
        return UserRole(value)
    except ValueError:
        raise ValidationError(f"invalid role. Options: {VALID_ROLES}")


class AdminService:
    """CRUD for categories, items and users on behalf of staff."""

    def __init__(self, repositories: Repositories):
        self.categories = repositories.categories
        self.items = repositories.items
        self.users = repositories.users

    # =========================================================================
    # MENU
    # =========================================================================

    async def list_menu(self) -> dict[str, list[dict[str, Any]]]:
        categories, items = await asyncio.gather(
            self.categories.list_all(),
            self.items.list_all(),
        )
        return {
            "categories": [map_category(c) for c in categories],
            "items": [map_item(i) for i in items],
        }

    # =========================================================================
    # CATEGORIES
    # =========================================================================

    async def _get_category(self, category_id: str) -> Category:
        category = await self.categories.get(category_id)
        if category is None:
            raise NotFound("Category not found")
        return category

    async def create_category(self, data: CategoryCreate) -> dict[str, Any]:
        name = _required_text(data.name, "name")

        if await self.categories.find_by_name(name) is not None:
            raise ConflictError("Category with this name already exists")

        category = await self.categories.add(new_category(name, data.description))
        logger.info(f"Category created: {category.id} '{category.name}'")
        return map_category(category)

    async def update_category(self, category_id: str, patch: CategoryUpdate) -> dict[str, Any]:
        category = await self._get_category(category_id)
        changes = patch.patch()

        if "name" in changes:
            category.name = _required_text(changes["name"], "name")
        if "description" in changes:
            category.description = changes["description"]
        if "is_active" in changes:
            category.is_active = changes["is_active"]

        category = await self.categories.save(category)
        logger.info(f"Category updated: {category.id} ({', '.join(changes) or 'no changes'})")
        return map_category(category)

    async def delete_category(self, category_id: str) -> None:
        if not await self.categories.delete(category_id):
            raise NotFound("Category not found")
        removed = await self.items.delete_by_category(category_id)
        logger.info(f"Category deleted: {category_id} (+{removed} items)")

    # =========================================================================
    # ITEMS
    # =========================================================================

    async def _check_category(self, category_id: str) -> None:
        if await self.categories.get(category_id) is None:
            raise ValidationError("invalid categoryId")

    async def create_item(self, data: MenuItemCreate) -> dict[str, Any]:
        name = (data.name or "").strip()
        if not name or data.price is None or not data.category_id:
            raise ValidationError("name, price and categoryId are required")

        await self._check_category(data.category_id)

        item = await self.items.add(new_menu_item(name, data.price, data.category_id))
        logger.info(f"Item created: {item.id} '{item.name}' in {item.category_id}")
        return map_item(item)

    async def update_item(self, item_id: str, patch: MenuItemUpdate) -> dict[str, Any]:
        item: Optional[MenuItem] = await self.items.get(item_id)
        if item is None:
            raise NotFound("Item not found")
        changes = patch.patch()

        if "name" in changes:
            item.name = _required_text(changes["name"], "name")
        if "price" in changes:
            item.price = changes["price"]
        if "category_id" in changes:
            await self._check_category(changes["category_id"])
            item.category_id = changes["category_id"]
        if "available" in changes:
            item.available = changes["available"]

        item = await self.items.save(item)
        logger.info(f"Item updated: {item.id} ({', '.join(changes) or 'no changes'})")
        return map_item(item)

    async def delete_item(self, item_id: str) -> None:
        if not await self.items.delete(item_id):
            raise NotFound("Item not found")
        logger.info(f"Item deleted: {item_id}")

    # =========================================================================
    # USERS
    # =========================================================================

    async def list_users(self) -> list[dict[str, Any]]:
        return [map_user(u) for u in await self.users.list_newest_first()]

    async def create_user(self, data: UserCreate) -> dict[str, Any]:
        name = _required_text(data.name, "name")
        email = normalize_email(_required_text(data.email, "email"))
        if not data.password:
            raise ValidationError("password is required")
        password = _password(data.password)
        role = _role(data.role) if data.role is not None else UserRole.CUSTOMER

        if await self.users.find_by_email(email) is not None:
            raise ConflictError("User with this email already exists")

        user = await self.users.create(new_user(name, email, role), password)
        logger.info(f"User created: {user.id} ({user.role.value})")
        return map_user(user)

    async def update_user(self, user_id: str, patch: UserUpdate) -> dict[str, Any]:
        user: Optional[User] = await self.users.get(user_id)
        if user is None:
            raise NotFound("User not found")
        changes = patch.patch()

        if "name" in changes:
            user.name = _required_text(changes["name"], "name")
        if "email" in changes:
            user.email = normalize_email(_required_text(changes["email"], "email"))
        if "role" in changes:
            user.role = _role(changes["role"])

        # An empty password means "keep the current one"
        password = changes.get("password") or None
        if password:
            _password(password)
        user = await self.users.update(user, password=password)
        logger.info(f"User updated: {user.id} ({', '.join(changes) or 'no changes'})")
        return map_user(user)

    async def delete_user(self, user_id: str) -> None:
        if not await self.users.delete(user_id):
            raise NotFound("User not found")
        logger.info(f"User deleted: {user_id}")
