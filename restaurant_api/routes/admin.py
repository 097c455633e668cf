"""
Admin API (``/api/admin``)

All endpoints are public until an authorization dependency is added to the
router.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from restaurant_api.routes import get_admin_service
from restaurant_api.schemas import (
    AdminMenuResponse,
    CategoryCreate,
    CategoryResponse,
    CategoryUpdate,
    ErrorResponse,
    MenuItemCreate,
    MenuItemResponse,
    MenuItemUpdate,
    MessageResponse,
    UserCreate,
    UserResponse,
    UserUpdate,
)
from restaurant_api.services import AdminService

router = APIRouter(
    prefix="/api/admin",
    tags=["Admin"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)

NOT_FOUND = {404: {"model": ErrorResponse}}


@router.get("", response_model=MessageResponse)
async def admin_root() -> dict[str, str]:
    """Simple admin API root."""
    return {"message": "Admin API is working"}


# =============================================================================
# MENU
# =============================================================================

@router.get("/menu", response_model=AdminMenuResponse)
async def list_menu(service: AdminService = Depends(get_admin_service)):
    """All categories (oldest first) and all items, unfiltered."""
    return await service.list_menu()


# =============================================================================
# CATEGORIES
# =============================================================================

@router.post("/categories", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    data: CategoryCreate,
    service: AdminService = Depends(get_admin_service),
):
    return await service.create_category(data)


@router.put("/categories/{category_id}", response_model=CategoryResponse, responses=NOT_FOUND)
async def update_category(
    category_id: str,
    patch: CategoryUpdate,
    service: AdminService = Depends(get_admin_service),
):
    return await service.update_category(category_id, patch)


@router.delete(
    "/categories/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=NOT_FOUND,
)
async def delete_category(
    category_id: str,
    service: AdminService = Depends(get_admin_service),
) -> Response:
    """Delete a category and every item in it."""
    await service.delete_category(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =============================================================================
# ITEMS
# =============================================================================

@router.post("/items", response_model=MenuItemResponse, status_code=status.HTTP_201_CREATED)
async def create_item(
    data: MenuItemCreate,
    service: AdminService = Depends(get_admin_service),
):
    return await service.create_item(data)


@router.put("/items/{item_id}", response_model=MenuItemResponse, responses=NOT_FOUND)
async def update_item(
    item_id: str,
    patch: MenuItemUpdate,
    service: AdminService = Depends(get_admin_service),
):
    return await service.update_item(item_id, patch)


@router.delete("/items/{item_id}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND)
async def delete_item(
    item_id: str,
    service: AdminService = Depends(get_admin_service),
) -> Response:
    await service.delete_item(item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =============================================================================
# USERS
# =============================================================================

@router.get("/users", response_model=List[UserResponse])
async def list_users(service: AdminService = Depends(get_admin_service)):
    """All users, newest first."""
    return await service.list_users()


@router.post("/users", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    data: UserCreate,
    service: AdminService = Depends(get_admin_service),
):
    return await service.create_user(data)


@router.put("/users/{user_id}", response_model=UserResponse, responses=NOT_FOUND)
async def update_user(
    user_id: str,
    patch: UserUpdate,
    service: AdminService = Depends(get_admin_service),
):
    return await service.update_user(user_id, patch)


@router.delete("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND)
async def delete_user(
    user_id: str,
    service: AdminService = Depends(get_admin_service),
) -> Response:
    await service.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
