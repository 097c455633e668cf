"""
SQLAlchemy Database Models

Four independent collections:
- Restaurant (one record per tenant)
- Category
- MenuItem
- User

Defaults are filled by the ``new_*`` constructor functions at the point an
entity is built, so every row carries explicit values when it reaches the
database. Uniqueness of category names and user emails is checked by the
services, not by database indexes; a menu item's category reference is
likewise validated by the admin service rather than a foreign key.
"""

import enum
import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Boolean, Column, DateTime, Enum, Float, String, Text

from restaurant_api.core.errors import ValidationError
from restaurant_api.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return uuid.uuid4().hex


class SubscriptionPlan(str, enum.Enum):
    ESSENTIAL = "ESSENTIAL"
    PROFESSIONAL = "PROFESSIONAL"
    ENTERPRISE = "ENTERPRISE"


class SubscriptionStatus(str, enum.Enum):
    TRIAL = "TRIAL"
    ACTIVE = "ACTIVE"
    SUSPENDED = "SUSPENDED"


class UserRole(str, enum.Enum):
    """Account roles."""
    CUSTOMER = "customer"
    EMPLOYEE = "employee"
    ADMIN = "admin"


class Restaurant(Base):
    """
    Tenant record: public website, subscription and POS settings.

    Only one instance is expected in practice.
    """
    __tablename__ = "restaurants"

    id = Column(String(32), primary_key=True)

    # =========================================================================
    # WEBSITE
    # =========================================================================
    subdomain = Column(String, nullable=False, unique=True, index=True)
    is_public = Column(Boolean, nullable=False)
    name = Column(String, nullable=False)
    logo_url = Column(String, nullable=True)
    banner_url = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    contact_phone = Column(String, nullable=True)
    contact_email = Column(String, nullable=True)
    address = Column(String, nullable=True)

    # =========================================================================
    # SUBSCRIPTION
    # =========================================================================
    plan = Column(Enum(SubscriptionPlan), nullable=False)
    status = Column(Enum(SubscriptionStatus), nullable=False)
    trial_ends_at = Column(DateTime(timezone=True), nullable=True)
    expires_at = Column(DateTime(timezone=True), nullable=True)

    # =========================================================================
    # SETTINGS
    # =========================================================================
    allow_order_when_out_of_stock = Column(Boolean, nullable=False)

    # =========================================================================
    # TIMESTAMPS
    # =========================================================================
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False, onupdate=utcnow)

    def __repr__(self):
        return f"<Restaurant {self.subdomain} - {self.plan.value}/{self.status.value}>"


class Category(Base):
    """A named grouping of menu items."""
    __tablename__ = "categories"

    id = Column(String(32), primary_key=True)
    name = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=False)
    is_active = Column(Boolean, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, index=True)

    def __repr__(self):
        return f"<Category {self.name}>"


class MenuItem(Base):
    """A sellable item belonging to exactly one category."""
    __tablename__ = "menu_items"

    id = Column(String(32), primary_key=True)
    name = Column(String, nullable=False)
    price = Column(Float, nullable=False)
    category_id = Column(String(32), nullable=True, index=True)
    available = Column(Boolean, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<MenuItem {self.name} - {self.price}>"


class User(Base):
    """Back-office or customer account. Only the bcrypt hash is stored."""
    __tablename__ = "users"

    id = Column(String(32), primary_key=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(Enum(UserRole), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, index=True)

    def __repr__(self):
        return f"<User {self.email} - {self.role.value}>"


# =============================================================================
# CONSTRUCTORS
# =============================================================================

def normalize_email(email: str) -> str:
    return email.strip().lower()


def new_restaurant(
    subdomain: str,
    name: str,
    is_public: bool = True,
    plan: SubscriptionPlan = SubscriptionPlan.ESSENTIAL,
    status: SubscriptionStatus = SubscriptionStatus.TRIAL,
    allow_order_when_out_of_stock: bool = False,
    **website,
) -> Restaurant:
    """
    Build a Restaurant with every default filled in.

    ``subdomain`` is trimmed and lowercased; ``name`` is trimmed. Both are
    required. Remaining keyword arguments are optional website fields
    (``logo_url``, ``description``, ``contact_email``...) and subscription
    dates.

    Raises:
        ValidationError: blank subdomain or name, unknown plan or status
    """
    subdomain = (subdomain or "").strip().lower()
    name = (name or "").strip()
    if not subdomain:
        raise ValidationError("subdomain is required")
    if not name:
        raise ValidationError("name is required")
    try:
        plan = SubscriptionPlan(plan)
        status = SubscriptionStatus(status)
    except ValueError as exc:
        raise ValidationError(str(exc)) from exc

    now = utcnow()
    return Restaurant(
        id=new_id(),
        subdomain=subdomain,
        name=name,
        is_public=is_public,
        plan=plan,
        status=status,
        allow_order_when_out_of_stock=allow_order_when_out_of_stock,
        created_at=now,
        updated_at=now,
        **website,
    )


def new_category(name: str, description: Optional[str] = None, is_active: bool = True) -> Category:
    return Category(
        id=new_id(),
        name=name.strip(),
        description=description if description is not None else "",
        is_active=is_active,
        created_at=utcnow(),
    )


def new_menu_item(name: str, price: float, category_id: str, available: bool = True) -> MenuItem:
    return MenuItem(
        id=new_id(),
        name=name.strip(),
        price=price,
        category_id=category_id,
        available=available,
        created_at=utcnow(),
    )


def new_user(name: str, email: str, role: UserRole = UserRole.CUSTOMER) -> User:
    """Build a User without a password; the user repository sets the hash on save."""
    return User(
        id=new_id(),
        name=name.strip(),
        email=normalize_email(email),
        role=UserRole(role),
        created_at=utcnow(),
    )
