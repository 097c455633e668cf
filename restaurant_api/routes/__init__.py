"""
HTTP routers and their dependencies.

Services are built once in the application lifespan and stored on
``app.state``; routes receive them through ``Depends``.
"""

from fastapi import Request

from restaurant_api.services import AdminService, CustomerService


def get_admin_service(request: Request) -> AdminService:
    return request.app.state.admin_service


def get_customer_service(request: Request) -> CustomerService:
    return request.app.state.customer_service
