"""
Local Catalog API Client (Mock/Local).

Purpose:
- Acts as the catalog backend when no API server is available.
- Runs the same ProductService the FastAPI app uses, in-process.

Behavior guidelines:
- Missing products raise CatalogApiError with status 404, like the HTTP API
- Validation failures raise CatalogApiError with status 400
- ``fail_next`` lets tests simulate a backend outage for the next N calls
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from storefront.catalog.models import Product
from storefront.integrations.contracts.catalog_api import CatalogApi, ProductCreateRequest
from storefront.integrations.response_wrappers import CatalogApiError
from storefront.services.product_service import ProductNotFoundError, ProductService, ProductValidationError

logger = logging.getLogger(__name__)


class LocalCatalogApiClient(CatalogApi):
    def __init__(self, service: Optional[ProductService] = None) -> None:
        self.service = service or ProductService()
        self.fail_next = 0
        self.calls: List[str] = []
        logger.info("[LOCAL CATALOG] Client initialised (%d products)", len(self.service.list_products()))

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if self.fail_next > 0:
            self.fail_next -= 1
            raise CatalogApiError("Simulated backend failure", status=503)

    async def list_products(
        self,
        category: Optional[str] = None,
        search: Optional[str] = None,
        trending: bool = False,
        limit: Optional[int] = None,
    ) -> List[Product]:
        self._record("list_products")
        return self.service.query(category=category, search=search, trending=trending, limit=limit)

    async def get_product(self, product_id: str) -> Product:
        self._record("get_product")
        product = self.service.get_product(product_id)
        if product is None:
            raise CatalogApiError("Product not found", status=404)
        return product

    async def create_product(self, request: ProductCreateRequest) -> Product:
        self._record("create_product")
        try:
            return self.service.create_product(request)
        except ProductValidationError as exc:
            raise CatalogApiError(str(exc), status=400) from exc

    async def update_product(self, product_id: str, changes: Dict[str, Any]) -> Product:
        self._record("update_product")
        try:
            return self.service.update_product(product_id, changes)
        except ProductNotFoundError as exc:
            raise CatalogApiError("Product not found", status=404) from exc
        except ProductValidationError as exc:
            raise CatalogApiError(str(exc), status=400) from exc

    async def delete_product(self, product_id: str) -> None:
        self._record("delete_product")
        if not self.service.delete_product(product_id):
            raise CatalogApiError("Product not found", status=404)

    async def update_stock(self, product_id: str, variant_id: str, stock: int) -> None:
        self._record("update_stock")
        try:
            updated = self.service.update_stock(product_id, variant_id, stock)
        except ProductValidationError as exc:
            raise CatalogApiError(str(exc), status=400) from exc
        if not updated:
            raise CatalogApiError("Product or variant not found", status=404)
