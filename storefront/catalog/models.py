"""
Catalog data models.

Attributes are snake_case in Python and camelCase on the wire, so a product
read from the API or a snapshot serializes back to the same JSON shape.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Category = Literal["football", "anime", "pop-culture"]
CATEGORIES = ("football", "anime", "pop-culture")


class WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")

    @classmethod
    def from_wire(cls, data: Dict[str, Any]):
        return cls.model_validate(data)


class SizeGuide(WireModel):
    sizes: List[str] = Field(default_factory=list)
    measurements: Dict[str, str] = Field(default_factory=dict)


class ProductVariant(WireModel):
    id: str
    size: Optional[str] = None
    color: Optional[str] = None
    price: float
    original_price: float
    stock: int = Field(default=0, ge=0)
    sku: str


class Product(WireModel):
    id: str
    name: str
    description: str = ""
    category: Category
    subcategory: str = ""
    images: List[str] = Field(default_factory=list)
    variants: List[ProductVariant] = Field(default_factory=list)
    base_price: float
    original_price: float
    rating: float = 0.0
    reviews: int = 0
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
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def is_purchasable(self) -> bool:
        return any(v.stock > 0 for v in self.variants)

    @property
    def total_stock(self) -> int:
        return sum(v.stock for v in self.variants)

    def variant(self, variant_id: str) -> Optional[ProductVariant]:
        return next((v for v in self.variants if v.id == variant_id), None)

    def price_warnings(self) -> List[str]:
        """Human-readable notes about inconsistent admin-entered prices."""
        warnings = []
        if self.base_price > self.original_price:
            warnings.append(f"basePrice {self.base_price} exceeds originalPrice {self.original_price}")
        for v in self.variants:
            if v.price > v.original_price:
                warnings.append(f"variant {v.id} price {v.price} exceeds originalPrice {v.original_price}")
        if not self.variants:
            warnings.append("product has no variants and cannot be purchased")
        return warnings
