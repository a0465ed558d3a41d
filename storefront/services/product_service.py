"""
Product service for the backend CRUD API.

Keeps the database of record for products. With ``db_path`` set, products are
stored as a JSON array on disk (seeded from the bundled catalog when the file
is missing or empty); without it, everything stays in memory, which is what
tests and the local mock client use.
"""

from __future__ import annotations

import json
import logging
import re
import time
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

from pydantic import ValidationError

from storefront.catalog.defaults import default_products
from storefront.catalog.models import Product, ProductVariant
from storefront.integrations.contracts.catalog_api import ProductCreateRequest

logger = logging.getLogger(__name__)

DEFAULT_TRENDING_LIMIT = 8


class ProductValidationError(ValueError):
    pass


class ProductNotFoundError(LookupError):
    pass


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _millis() -> int:
    return int(time.time() * 1000)


def generate_product_id() -> str:
    return f"product_{_millis()}_{uuid.uuid4().hex[:9]}"


def generate_variant_id() -> str:
    return f"variant_{_millis()}_{uuid.uuid4().hex[:9]}"


def generate_sku(product_name: str, size: Optional[str] = None, color: Optional[str] = None) -> str:
    clean_name = re.sub(r"[^a-zA-Z0-9]", "", product_name).upper()
    size_part = f"-{size}" if size else ""
    color_part = f"-{re.sub(r'[^a-zA-Z0-9]', '', color)}" if color else ""
    suffix = str(_millis())[-4:]
    return f"{clean_name[:6]}{size_part}{color_part}-{suffix}"


class ProductService:
    def __init__(
        self,
        db_path: Optional[Path] = None,
        seed: Optional[Callable[[], List[Product]]] = None,
    ) -> None:
        self.db_path = Path(db_path) if db_path else None
        self._seed = seed or default_products
        self._products: List[Product] = self._initialize()

    # ------------------------------------------------------------------
    # Storage
    # ------------------------------------------------------------------

    def _initialize(self) -> List[Product]:
        if self.db_path is None:
            return list(self._seed())

        products = self._load()
        if not products:
            products = list(self._seed())
            self._save(products)
        return products

    def _load(self) -> List[Product]:
        if self.db_path is None or not self.db_path.exists():
            return []
        try:
            with open(self.db_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return [Product.model_validate(item) for item in data]
        except (OSError, json.JSONDecodeError, TypeError, ValidationError) as exc:
            logger.error("Error loading products from %s: %s", self.db_path, exc)
            return []

    def _save(self, products: List[Product]) -> None:
        self._products = products
        if self.db_path is None:
            return
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.db_path, "w", encoding="utf-8") as f:
            json.dump([p.to_wire() for p in products], f, ensure_ascii=False, indent=2)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        return list(self._products)

    def get_product(self, product_id: str) -> Optional[Product]:
        return next((p for p in self._products if p.id == product_id), None)

    def products_by_category(self, category: str) -> List[Product]:
        return [p for p in self._products if p.category == category]

    def trending_products(self, limit: int = DEFAULT_TRENDING_LIMIT) -> List[Product]:
        return [p for p in self._products if p.is_trending][:limit]

    def search_products(self, query: str) -> List[Product]:
        q = query.lower()
        return [
            p
            for p in self._products
            if q in p.name.lower()
            or q in p.description.lower()
            or any(q in tag.lower() for tag in p.tags)
            or q in p.category.lower()
            or q in p.subcategory.lower()
            or (p.brand is not None and q in p.brand.lower())
        ]

    def query(
        self,
        category: Optional[str] = None,
        search: Optional[str] = None,
        trending: bool = False,
        limit: Optional[int] = None,
    ) -> List[Product]:
        """Filter precedence: trending, then category, then search."""
        if trending:
            return self.trending_products(limit or DEFAULT_TRENDING_LIMIT)
        if category:
            results = self.products_by_category(category)
        elif search:
            results = self.search_products(search)
        else:
            results = self.list_products()
        return results[:limit] if limit else results

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def create_product(self, request: Union[ProductCreateRequest, Dict[str, Any]]) -> Product:
        if isinstance(request, dict):
            if not request.get("name") or not request.get("description") or not request.get("category"):
                raise ProductValidationError("Missing required fields: name, description, and category are required")
            try:
                request = ProductCreateRequest.model_validate(request)
            except ValidationError as exc:
                raise ProductValidationError(f"Invalid product: {exc}") from exc

        if not request.name or not request.description:
            raise ProductValidationError("Missing required fields: name, description, and category are required")
        if not request.variants:
            raise ProductValidationError("At least one product variant is required")

        now = _now_iso()
        data = request.model_dump(exclude={"variants"}, exclude_none=True)
        product = Product(
            **data,
            id=generate_product_id(),
            rating=4.5,
            reviews=0,
            variants=[
                ProductVariant(
                    id=generate_variant_id(),
                    sku=generate_sku(request.name, v.size, v.color),
                    **v.model_dump(exclude_none=True),
                )
                for v in request.variants
            ],
            created_at=now,
            updated_at=now,
        )
        self._save(self._products + [product])
        logger.info("Created product %s", product.id)
        return product

    def update_product(self, product_id: str, changes: Dict[str, Any]) -> Product:
        existing = self.get_product(product_id)
        if existing is None:
            raise ProductNotFoundError(product_id)

        changes = {k: v for k, v in changes.items() if k not in ("id", "createdAt")}
        if "variants" in changes and isinstance(changes["variants"], list):
            changes["variants"] = [self._merge_variant(existing, v, changes.get("name")) for v in changes["variants"]]

        merged = {**existing.to_wire(), **changes, "updatedAt": _now_iso()}
        try:
            updated = Product.model_validate(merged)
        except ValidationError as exc:
            raise ProductValidationError(f"Invalid product update: {exc}") from exc

        self._save([updated if p.id == product_id else p for p in self._products])
        return updated

    @staticmethod
    def _merge_variant(existing: Product, variant: Dict[str, Any], new_name: Optional[str]) -> Dict[str, Any]:
        """Keep the id/sku of the existing variant with the same size and colour."""
        match = next(
            (v for v in existing.variants if v.size == variant.get("size") and v.color == variant.get("color")),
            None,
        )
        return {
            **variant,
            "id": variant.get("id") or (match.id if match else generate_variant_id()),
            "sku": variant.get("sku")
            or (match.sku if match else generate_sku(new_name or existing.name, variant.get("size"), variant.get("color"))),
        }

    def delete_product(self, product_id: str) -> bool:
        remaining = [p for p in self._products if p.id != product_id]
        if len(remaining) == len(self._products):
            return False
        self._save(remaining)
        return True

    def update_stock(self, product_id: str, variant_id: str, stock: int) -> bool:
        if isinstance(stock, bool) or not isinstance(stock, int) or stock < 0:
            raise ProductValidationError("Stock must be a non-negative number")
        product = self.get_product(product_id)
        if product is None or product.variant(variant_id) is None:
            return False
        variants = [v.model_copy(update={"stock": stock}) if v.id == variant_id else v for v in product.variants]
        updated = product.model_copy(update={"variants": variants, "updated_at": _now_iso()})
        self._save([updated if p.id == product_id else p for p in self._products])
        return True
