"""
Catalog synchronizer.

Keeps the catalog cache an optimistic mirror of the backend. Updates,
deletes and stock changes are applied locally first and sent to the backend
afterwards; if the backend call fails the cache is put back to the last
known-good product list and the transport error is re-raised to the caller.
Creates wait for the backend because it assigns the product id.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from storefront.catalog.cache import CatalogCache
from storefront.catalog.models import Product
from storefront.integrations.contracts.catalog_api import CatalogApi, ProductCreateRequest
from storefront.integrations.response_wrappers import CatalogApiError

logger = logging.getLogger(__name__)


class CatalogSynchronizer:
    def __init__(self, cache: CatalogCache, client: CatalogApi) -> None:
        self.cache = cache
        self.client = client
        self.last_error: Optional[CatalogApiError] = None

    @contextmanager
    def _rollback_on_failure(self, action: str) -> Iterator[None]:
        known_good = self.cache.products
        try:
            yield
        except CatalogApiError as exc:
            logger.error("Backend %s failed, restoring local catalog: %s", action, exc)
            self.cache.replace_all(known_good)
            self.last_error = exc
            raise
        self.last_error = None

    async def refresh(self) -> List[Product]:
        """Replace the local catalog with the backend's list. An empty list is ignored."""
        try:
            products = await self.client.list_products()
        except CatalogApiError as exc:
            logger.error("Catalog refresh failed, keeping local catalog: %s", exc)
            self.last_error = exc
            raise
        self.last_error = None
        if not products:
            logger.warning("Backend returned no products; keeping local catalog")
            return self.cache.products
        self.cache.replace_all(products)
        logger.info("Catalog refreshed from backend (%d products)", len(products))
        return products

    async def create(self, request: ProductCreateRequest) -> Product:
        try:
            created = await self.client.create_product(request)
        except CatalogApiError as exc:
            logger.error("Backend create failed: %s", exc)
            self.last_error = exc
            raise
        self.last_error = None
        self.cache.add(created)
        return created

    async def update(self, product: Product) -> Product:
        with self._rollback_on_failure("update"):
            self.cache.update(product)
            changes: Dict[str, Any] = product.to_wire()
            changes.pop("id", None)
            saved = await self.client.update_product(product.id, changes)
        self.cache.update(saved)
        return saved

    async def delete(self, product_id: str) -> None:
        with self._rollback_on_failure("delete"):
            self.cache.delete(product_id)
            await self.client.delete_product(product_id)

    async def update_stock(self, product_id: str, variant_id: str, stock: int) -> None:
        with self._rollback_on_failure("stock update"):
            self.cache.update_stock(product_id, variant_id, stock)
            await self.client.update_stock(product_id, variant_id, stock)
