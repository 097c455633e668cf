"""
Mapping Layer

Pure transforms from stored rows to the JSON shapes the API exposes.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from restaurant_api.models import Category, MenuItem, User

UNCATEGORIZED = "Uncategorized"


def _utc(value: datetime) -> datetime:
    # SQLite hands timestamps back without an offset; they are stored as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _date(value: Optional[datetime]) -> Optional[str]:
    return _utc(value).date().isoformat() if value else None


def _timestamp(value: Optional[datetime]) -> Optional[str]:
    return _utc(value).isoformat() if value else None


def map_category(category: Category) -> dict[str, Any]:
    return {
        "id": category.id,
        "name": category.name,
        "description": category.description or "",
        "createdAt": _date(category.created_at),
    }


def map_item(item: MenuItem) -> dict[str, Any]:
    """Admin view of a menu item."""
    return {
        "id": item.id,
        "name": item.name,
        "price": item.price,
        "categoryId": item.category_id,
        "available": item.available,
    }


def map_user(user: User) -> dict[str, Any]:
    """Account view; the password hash never leaves the service."""
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "role": user.role.value if user.role is not None else None,
        "createdAt": _timestamp(user.created_at),
    }


def map_public_item(item: MenuItem, category: Optional[Category]) -> dict[str, Any]:
    """
    Customer view of a menu item.

    ``description`` comes from the item's category, not the item; items
    carry no description of their own. A missing category gives an empty
    description and the "Uncategorized" label.
    """
    return {
        "id": item.id,
        "name": item.name,
        "description": (category.description or "") if category is not None else "",
        "price": item.price,
        "category": category.name if category is not None else UNCATEGORIZED,
        "tags": [],
    }
