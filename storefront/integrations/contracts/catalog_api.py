"""
Catalog API contracts.

Request/response shapes for the backend product CRUD API, plus the interface
both the real HTTP client and the local mock implement.

These contracts must be used by both:
- clients/real_http/catalog_api.py (httpx client against the backend)
- clients/mocks/local_catalog_api.py (in-process backend for development/tests)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

from storefront.catalog.models import Category, Product, SizeGuide, WireModel

T = TypeVar("T")


class ApiEnvelope(BaseModel, Generic[T]):
    """``{success, data?, message?, error?}`` wrapper around every API response."""

    success: bool
    data: Optional[T] = None
    message: Optional[str] = None
    error: Optional[str] = None


class VariantInput(WireModel):
    """A variant as submitted by the admin surface; the backend assigns id and sku."""

    size: Optional[str] = None
    color: Optional[str] = None
    price: float
    original_price: float
    stock: int = Field(default=0, ge=0)


class ProductCreateRequest(WireModel):
    """Product minus id, rating, reviews and timestamps."""

    name: str
    description: str
    category: Category
    subcategory: str = ""
    images: List[str] = Field(default_factory=list)
    variants: List[VariantInput] = Field(default_factory=list)
    base_price: float
    original_price: float
    tags: List[str] = Field(default_factory=list)
    badges: List[str] = Field(default_factory=list)
    shipping_days: int = 7
    cod_available: bool = False
    is_trending: bool = False
    is_exclusive: bool = False
    stock_alert: Optional[str] = None
    brand: Optional[str] = None
    materials: Optional[List[str]] = None
    features: Optional[List[str]] = None
    size_guide: Optional[SizeGuide] = None


class StockUpdateRequest(WireModel):
    variant_id: str
    stock: int


class CatalogApi(ABC):
    """Every catalog backend client must implement this interface."""

    @abstractmethod
    async def list_products(
        self,
        category: Optional[str] = None,
        search: Optional[str] = None,
        trending: bool = False,
        limit: Optional[int] = None,
    ) -> List[Product]:
        """GET /products with optional filters."""

    @abstractmethod
    async def get_product(self, product_id: str) -> Product:
        """GET /products/{id}."""

    @abstractmethod
    async def create_product(self, request: ProductCreateRequest) -> Product:
        """POST /products."""

    @abstractmethod
    async def update_product(self, product_id: str, changes: Dict[str, Any]) -> Product:
        """PUT /products/{id} with a partial wire-shaped product."""

    @abstractmethod
    async def delete_product(self, product_id: str) -> None:
        """DELETE /products/{id}."""

    @abstractmethod
    async def update_stock(self, product_id: str, variant_id: str, stock: int) -> None:
        """PUT /products/{id}/stock."""

    async def search(self, query: str) -> List[Product]:
        return await self.list_products(search=query)

    async def get_trending(self, limit: int = 8) -> List[Product]:
        return await self.list_products(trending=True, limit=limit)

    async def get_by_category(self, category: str) -> List[Product]:
        return await self.list_products(category=category)
