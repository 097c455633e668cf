"""
Repositories

One repository object per collection, constructed once at startup from the
session factory and handed to the services that need them. Every call opens
its own short-lived session, so two reads can run concurrently under
``asyncio.gather``.

Store failures are wrapped in ``UnhandledStoreError``.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from restaurant_api.core.config import Settings
from restaurant_api.core.errors import UnhandledStoreError
from restaurant_api.core.security import hash_password
from restaurant_api.models import Category, MenuItem, Restaurant, User, new_restaurant

logger = logging.getLogger(__name__)


class BaseRepository:
    model = None

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]):
        self._session_maker = session_maker

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        async with self._session_maker() as session:
            try:
                yield session
            except SQLAlchemyError as exc:
                await session.rollback()
                raise UnhandledStoreError(f"{self.model.__name__} store error: {exc}") from exc

    async def get(self, entity_id: str):
        async with self.session() as session:
            return await session.get(self.model, entity_id)

    async def add(self, entity):
        async with self.session() as session:
            session.add(entity)
            await session.commit()
            return entity

    async def save(self, entity):
        """Persist changes made to a detached ``entity``."""
        async with self.session() as session:
            merged = await session.merge(entity)
            await session.commit()
            return merged

    async def delete(self, entity_id: str) -> bool:
        """Delete by id. Returns False when nothing matched."""
        async with self.session() as session:
            result = await session.execute(delete(self.model).where(self.model.id == entity_id))
            await session.commit()
            return result.rowcount > 0


class CategoryRepository(BaseRepository):
    model = Category

    async def list_all(self) -> list[Category]:
        async with self.session() as session:
            result = await session.execute(select(Category).order_by(Category.created_at.asc()))
            return list(result.scalars().all())

    async def list_active(self) -> list[Category]:
        async with self.session() as session:
            result = await session.execute(
                select(Category)
                .where(Category.is_active.is_(True))
                .order_by(Category.created_at.asc())
            )
            return list(result.scalars().all())

    async def find_by_name(self, name: str) -> Optional[Category]:
        async with self.session() as session:
            result = await session.execute(select(Category).where(Category.name == name).limit(1))
            return result.scalar_one_or_none()


class MenuItemRepository(BaseRepository):
    model = MenuItem

    async def list_all(self) -> list[MenuItem]:
        async with self.session() as session:
            result = await session.execute(select(MenuItem).order_by(MenuItem.created_at.asc()))
            return list(result.scalars().all())

    async def list_available_with_category(self) -> list[tuple[MenuItem, Optional[Category]]]:
        """Available items paired with their category (None when unresolved)."""
        async with self.session() as session:
            result = await session.execute(
                select(MenuItem, Category)
                .outerjoin(Category, MenuItem.category_id == Category.id)
                .where(MenuItem.available.is_(True))
                .order_by(MenuItem.created_at.asc())
            )
            return [(item, category) for item, category in result.all()]

    async def delete_by_category(self, category_id: str) -> int:
        async with self.session() as session:
            result = await session.execute(
                delete(MenuItem).where(MenuItem.category_id == category_id)
            )
            await session.commit()
            return result.rowcount


class UserRepository(BaseRepository):
    """
    Users. Passwords are hashed here, while saving, so callers only ever
    handle plain-text passwords on the way in.
    """
    model = User

    def __init__(self, session_maker: async_sessionmaker[AsyncSession], hash_rounds: int = 12):
        super().__init__(session_maker)
        self._hash_rounds = hash_rounds

    async def _hash(self, password: str) -> str:
        # bcrypt is CPU bound; keep it off the event loop
        return await asyncio.to_thread(hash_password, password, self._hash_rounds)

    async def list_newest_first(self) -> list[User]:
        async with self.session() as session:
            result = await session.execute(select(User).order_by(User.created_at.desc()))
            return list(result.scalars().all())

    async def find_by_email(self, email: str) -> Optional[User]:
        async with self.session() as session:
            result = await session.execute(select(User).where(User.email == email).limit(1))
            return result.scalar_one_or_none()

    async def create(self, user: User, password: str) -> User:
        user.password_hash = await self._hash(password)
        return await self.add(user)

    async def update(self, user: User, password: Optional[str] = None) -> User:
        """Save ``user``; re-hash when a new ``password`` is given."""
        if password:
            user.password_hash = await self._hash(password)
        return await self.save(user)


class RestaurantRepository(BaseRepository):
    model = Restaurant

    async def get_current(self) -> Optional[Restaurant]:
        async with self.session() as session:
            result = await session.execute(
                select(Restaurant).order_by(Restaurant.created_at.asc()).limit(1)
            )
            return result.scalar_one_or_none()

    async def ensure(self, name: str, subdomain: str) -> Restaurant:
        """Return the tenant record, creating it from ``name``/``subdomain`` if absent."""
        restaurant = await self.get_current()
        if restaurant is not None:
            return restaurant
        restaurant = await self.add(new_restaurant(subdomain=subdomain, name=name))
        logger.info(f"Created restaurant record '{restaurant.subdomain}'")
        return restaurant


@dataclass
class Repositories:
    """Handles to every collection, built once per application."""
    restaurants: RestaurantRepository
    categories: CategoryRepository
    items: MenuItemRepository
    users: UserRepository

    @classmethod
    def build(
        cls, session_maker: async_sessionmaker[AsyncSession], settings: Settings
    ) -> "Repositories":
        return cls(
            restaurants=RestaurantRepository(session_maker),
            categories=CategoryRepository(session_maker),
            items=MenuItemRepository(session_maker),
            users=UserRepository(session_maker, hash_rounds=settings.password_hash_rounds),
        )
