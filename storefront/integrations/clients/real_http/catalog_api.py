"""
Catalog API HTTP Client.

Purpose:
- Talks to the backend product CRUD API (/products)
- Unwraps the {success, data, message, error} envelope into catalog models

Implementation notes:
- httpx AsyncClient per request with a fixed timeout (30s by default)
- Writes (create/update) retry twice, reads once; 4xx responses are never retried
- Timeouts and connection failures surface as typed CatalogApiError subclasses
  with the original status/message preserved
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Any, Awaitable, Callable, Dict, List, Optional

import httpx

from storefront.catalog.models import Product
from storefront.integrations.contracts.catalog_api import CatalogApi, ProductCreateRequest, StockUpdateRequest
from storefront.integrations.response_wrappers import (
    CatalogApiError,
    CatalogApiNetworkError,
    CatalogApiTimeoutError,
    parse_product,
    parse_product_list,
    unwrap_envelope,
)
from storefront.utils.config_loader import ApiClientConfig

logger = logging.getLogger(__name__)


class CatalogApiClient(CatalogApi):
    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout_seconds: float = 30.0,
        read_retries: int = 1,
        write_retries: int = 2,
        backoff_base_seconds: float = 1.0,
        backoff_max_seconds: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Optional[Callable[[float], Awaitable[None]]] = None,
    ) -> None:
        self.base_url = (base_url or os.getenv("STOREFRONT_API_URL", "http://localhost:8000/api")).rstrip("/")
        self.api_key = api_key or os.getenv("STOREFRONT_API_KEY", "")
        self.timeout_seconds = timeout_seconds
        self.read_retries = read_retries
        self.write_retries = write_retries
        self.backoff_base_seconds = backoff_base_seconds
        self.backoff_max_seconds = backoff_max_seconds
        self._transport = transport
        self._sleep = sleep or asyncio.sleep

    @classmethod
    def from_config(cls, cfg: ApiClientConfig, **kwargs: Any) -> "CatalogApiClient":
        return cls(
            base_url=os.getenv("STOREFRONT_API_URL") or cfg.base_url,
            timeout_seconds=cfg.timeout_seconds,
            read_retries=cfg.read_retries,
            write_retries=cfg.write_retries,
            backoff_base_seconds=cfg.backoff_base_seconds,
            backoff_max_seconds=cfg.backoff_max_seconds,
            **kwargs,
        )

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
        retries: int = 0,
    ) -> Any:
        url = f"{self.base_url}{path}"
        attempt = 0
        while True:
            try:
                logger.debug("API Request %d/%d: %s %s", attempt + 1, retries + 1, method, url)
                return await self._send_once(method, url, params=params, json=json)
            except (CatalogApiTimeoutError, CatalogApiNetworkError):
                raise
            except CatalogApiError as exc:
                if exc.is_client_error:
                    raise
                if attempt >= retries:
                    logger.error("API Request failed after %d attempts: %s %s: %s", attempt + 1, method, url, exc)
                    raise
                delay = min(self.backoff_base_seconds * (2 ** attempt), self.backoff_max_seconds)
                logger.warning("API Request failed (%s), retrying in %.1fs...", exc, delay)
                await self._sleep(delay)
                attempt += 1

    async def _send_once(self, method: str, url: str, *, params=None, json=None) -> Any:
        client_kwargs: Dict[str, Any] = {"timeout": self.timeout_seconds}
        if self._transport is not None:
            client_kwargs["transport"] = self._transport

        try:
            async with httpx.AsyncClient(**client_kwargs) as client:
                response = await client.request(method, url, params=params, json=json, headers=self._headers())
        except httpx.TimeoutException as exc:
            raise CatalogApiTimeoutError(f"Request timed out after {self.timeout_seconds}s: {method} {url}") from exc
        except httpx.TransportError as exc:
            raise CatalogApiNetworkError(
                f"Network error. Please check your connection and try again. ({exc})"
            ) from exc

        status = response.status_code
        body: Any = None
        if response.content:
            try:
                body = response.json()
            except ValueError:
                body = None

        if not response.is_success:
            message = f"HTTP error! status: {status}"
            if isinstance(body, dict) and (body.get("error") or body.get("detail")):
                message = str(body.get("error") or body.get("detail"))
            raise CatalogApiError(message, status=status, payload=body if isinstance(body, dict) else None)

        if status == 204 or body is None:
            return None
        return unwrap_envelope(body, status=status)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def list_products(
        self,
        category: Optional[str] = None,
        search: Optional[str] = None,
        trending: bool = False,
        limit: Optional[int] = None,
    ) -> List[Product]:
        params: Dict[str, Any] = {}
        if category:
            params["category"] = category
        if search:
            params["search"] = search
        if trending:
            params["trending"] = "true"
        if limit:
            params["limit"] = str(limit)
        data = await self._request("GET", "/products", params=params or None, retries=self.read_retries)
        return parse_product_list(data)

    async def get_product(self, product_id: str) -> Product:
        data = await self._request("GET", f"/products/{product_id}", retries=self.read_retries)
        return parse_product(data)

    async def create_product(self, request: ProductCreateRequest) -> Product:
        data = await self._request("POST", "/products", json=request.to_wire(), retries=self.write_retries)
        return parse_product(data)

    async def update_product(self, product_id: str, changes: Dict[str, Any]) -> Product:
        data = await self._request("PUT", f"/products/{product_id}", json=changes, retries=self.write_retries)
        return parse_product(data)

    async def delete_product(self, product_id: str) -> None:
        await self._request("DELETE", f"/products/{product_id}")

    async def update_stock(self, product_id: str, variant_id: str, stock: int) -> None:
        body = StockUpdateRequest(variant_id=variant_id, stock=stock).to_wire()
        await self._request("PUT", f"/products/{product_id}/stock", json=body)
