"""
Catalog cache.

Holds the in-process product list, reconciles it with the persisted snapshot
on first access and re-persists the full list after every mutation.

Lifecycle::

    UNINITIALIZED --first access--> LOADING --> READY (origin SEEDED | RESTORED)
    READY --mutation--> READY
    READY --reset()--> READY (origin RESET)

A snapshot that is missing, empty, not a list, or not valid JSON is replaced
by the bundled defaults. A non-empty list is adopted as stored; entries that
do not parse as products are logged and skipped. A failed save never breaks the
mutation: the cache logs it and keeps serving from memory.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, List, Optional, Sequence

from pydantic import ValidationError

from storefront.catalog.defaults import default_products
from storefront.catalog.models import Product
from storefront.storage.ports import SnapshotCorruptError, SnapshotPort

logger = logging.getLogger(__name__)

DEFAULT_TRENDING_LIMIT = 8


class CatalogError(ValueError):
    """Invalid catalog mutation."""


class DuplicateProductError(CatalogError):
    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product '{product_id}' already exists")
        self.product_id = product_id


class CatalogState(str, Enum):
    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"


class CatalogOrigin(str, Enum):
    SEEDED = "seeded"
    RESTORED = "restored"
    RESET = "reset"


class CatalogCache:
    def __init__(
        self,
        snapshot_port: SnapshotPort,
        seed: Optional[Callable[[], List[Product]]] = None,
    ) -> None:
        self._port = snapshot_port
        self._seed = seed or default_products
        self._products: List[Product] = []
        self.state = CatalogState.UNINITIALIZED
        self.origin: Optional[CatalogOrigin] = None
        self.memory_only = False

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self) -> None:
        """Read the persisted snapshot. Called lazily by every accessor."""
        if self.state is not CatalogState.UNINITIALIZED:
            return
        self.state = CatalogState.LOADING

        restored = self._restore()
        if restored is not None:
            self._products = restored
            self.origin = CatalogOrigin.RESTORED
            logger.info("Catalog restored from snapshot (%d products)", len(restored))
        else:
            self._products = list(self._seed())
            self.origin = CatalogOrigin.SEEDED
            logger.info("Catalog seeded with %d default products", len(self._products))
            self._persist()

        self.state = CatalogState.READY

    def _restore(self) -> Optional[List[Product]]:
        try:
            raw = self._port.load()
        except SnapshotCorruptError as exc:
            logger.error("Error loading saved products, falling back to defaults: %s", exc)
            self._port.clear()
            return None

        if not isinstance(raw, list) or not raw:
            if raw is not None:
                logger.warning("Saved catalog snapshot is empty or not a list; using default products")
            return None

        products = []
        for index, item in enumerate(raw):
            try:
                products.append(Product.model_validate(item))
            except ValidationError as exc:
                logger.warning("Skipping unreadable product at position %d in saved catalog: %s", index, exc)
        return products

    def _persist(self) -> None:
        snapshot = [p.to_wire() for p in self._products]
        if self._port.save(snapshot):
            if self.memory_only:
                logger.info("Catalog persistence recovered")
            self.memory_only = False
            return
        if not self.memory_only:
            logger.warning("Catalog snapshot could not be saved; continuing in memory-only mode")
        self.memory_only = True

    def _ready(self) -> List[Product]:
        if self.state is not CatalogState.READY:
            self.load()
        return self._products

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def products(self) -> List[Product]:
        return list(self._ready())

    def __len__(self) -> int:
        return len(self._ready())

    def by_id(self, product_id: str) -> Optional[Product]:
        return next((p for p in self._ready() if p.id == product_id), None)

    def by_category(self, category: str) -> List[Product]:
        return [p for p in self._ready() if p.category == category]

    def by_subcategory(self, subcategory: str) -> List[Product]:
        return [p for p in self._ready() if p.subcategory == subcategory]

    def trending(self, limit: int = DEFAULT_TRENDING_LIMIT) -> List[Product]:
        return [p for p in self._ready() if p.is_trending][: max(limit, 0)]

    def search(self, query: str) -> List[Product]:
        needle = (query or "").lower()
        return [
            p
            for p in self._ready()
            if needle in p.name.lower()
            or needle in p.description.lower()
            or any(needle in tag.lower() for tag in p.tags)
        ]

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, product: Product) -> Product:
        current = self._ready()
        if any(p.id == product.id for p in current):
            raise DuplicateProductError(product.id)
        self._warn_prices(product)
        self._products = current + [product]
        self._persist()
        return product

    def update(self, product: Product) -> Optional[Product]:
        """Replace the product with the same id. Unknown ids are a no-op."""
        current = self._ready()
        if not any(p.id == product.id for p in current):
            logger.warning("Ignoring update for unknown product '%s'", product.id)
            return None
        self._warn_prices(product)
        self._products = [product if p.id == product.id else p for p in current]
        self._persist()
        return product

    def delete(self, product_id: str) -> bool:
        current = self._ready()
        remaining = [p for p in current if p.id != product_id]
        if len(remaining) == len(current):
            return False
        self._products = remaining
        self._persist()
        return True

    def update_stock(self, product_id: str, variant_id: str, stock: int) -> Optional[Product]:
        if isinstance(stock, bool) or not isinstance(stock, int) or stock < 0:
            raise CatalogError("Stock must be a non-negative integer")
        product = self.by_id(product_id)
        if product is None or product.variant(variant_id) is None:
            return None
        variants = [v.model_copy(update={"stock": stock}) if v.id == variant_id else v for v in product.variants]
        return self.update(product.model_copy(update={"variants": variants}))

    def replace_all(self, products: Sequence[Product]) -> None:
        """Adopt a complete product list, e.g. fresh from the backend."""
        self._ready()
        self._products = list(products)
        self._persist()

    def reset(self) -> None:
        """Discard the persisted snapshot and reseed from the bundled defaults."""
        self._port.clear()
        self._products = list(self._seed())
        self.state = CatalogState.READY
        self.origin = CatalogOrigin.RESET
        self.memory_only = False
        logger.info("Catalog reset to %d default products", len(self._products))

    @staticmethod
    def _warn_prices(product: Product) -> None:
        for warning in product.price_warnings():
            logger.warning("Product '%s': %s", product.id, warning)
