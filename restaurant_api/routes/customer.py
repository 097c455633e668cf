"""
Customer API (``/api``)
"""

from typing import List

from fastapi import APIRouter, Depends

from restaurant_api.routes import get_customer_service
from restaurant_api.schemas import MessageResponse, PublicMenuItem
from restaurant_api.services import CustomerService

router = APIRouter(prefix="/api", tags=["Customer"])


@router.get("/", response_model=MessageResponse)
async def customer_root() -> dict[str, str]:
    """Simple customer API root."""
    return {"message": "Customer API is working"}


@router.get("/menu", response_model=List[PublicMenuItem])
async def public_menu(service: CustomerService = Depends(get_customer_service)):
    """Available items with their category name."""
    return await service.public_menu()
