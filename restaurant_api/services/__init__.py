"""
                        Services Module

Business logic behind the HTTP routes.

Services:
    - admin: back-office CRUD for categories, items and users
    - customer: public menu
    - mapping: stored rows to API response shapes
"""

from restaurant_api.services.admin import AdminService
from restaurant_api.services.customer import CustomerService

__all__ = ["AdminService", "CustomerService"]
