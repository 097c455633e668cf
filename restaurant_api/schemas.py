"""
Pydantic Schemas for Request/Response Validation

Request bodies only check types; every field is optional so that the services
decide what is required and answer with a ``ValidationError``. Update bodies
are patches: a field the client did not send is left untouched.

External JSON uses camelCase keys (``categoryId``, ``isActive``,
``createdAt``); Python attributes stay snake_case.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def patch(self) -> dict[str, Any]:
        """Fields present in the request body with a non-null value."""
        return {
            name: value
            for name, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class CategoryCreate(CamelModel):
    name: Optional[str] = Field(None, examples=["Drinks"])
    description: Optional[str] = Field(None, examples=["Cold and hot drinks"])


class CategoryUpdate(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    is_active: Optional[StrictBool] = Field(None, alias="isActive")


class MenuItemCreate(CamelModel):
    name: Optional[str] = Field(None, examples=["Cola"])
    price: Optional[float] = Field(None, examples=[2.5])
    category_id: Optional[str] = Field(None, alias="categoryId")


class MenuItemUpdate(CamelModel):
    name: Optional[str] = None
    price: Optional[float] = None
    category_id: Optional[str] = Field(None, alias="categoryId")
    available: Optional[StrictBool] = None


class UserCreate(CamelModel):
    name: Optional[str] = Field(None, examples=["Jane Doe"])
    email: Optional[str] = Field(None, examples=["jane@example.com"])
    password: Optional[str] = None
    role: Optional[str] = Field(None, examples=["employee"])


class UserUpdate(CamelModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class CategoryResponse(CamelModel):
    id: str
    name: str
    description: str
    created_at: str = Field(alias="createdAt")


class MenuItemResponse(CamelModel):
    id: str
    name: str
    price: float
    category_id: Optional[str] = Field(alias="categoryId")
    available: bool


class UserResponse(CamelModel):
    id: str
    name: str
    email: str
    role: str
    created_at: str = Field(alias="createdAt")


class AdminMenuResponse(BaseModel):
    categories: List[CategoryResponse]
    items: List[MenuItemResponse]


class PublicMenuItem(BaseModel):
    id: str
    name: str
    description: str
    price: float
    category: str
    tags: List[str] = []


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    """Standard error response."""
    success: bool = False
    error: str
    detail: Optional[str] = None


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    database: str
    restaurant: Optional[str] = None
    timestamp: str
