from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from storefront.catalog.models import Product
from storefront.integrations.contracts.catalog_api import ApiEnvelope


class CatalogApiError(RuntimeError):
    """
    A catalog API call failed.

    ``status`` is the HTTP status when the server answered, else None.
    """

    def __init__(self, message: str, *, status: Optional[int] = None, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.status = status
        self.message = message
        self.payload = payload or {}

    @property
    def is_client_error(self) -> bool:
        return self.status is not None and 400 <= self.status < 500


class CatalogApiTimeoutError(CatalogApiError):
    pass


class CatalogApiNetworkError(CatalogApiError):
    pass


class EnvelopeError(CatalogApiError):
    """The response body is not a valid ``{success, data, ...}`` envelope."""


def unwrap_envelope(raw: Any, *, status: Optional[int] = None) -> Any:
    """Return ``data`` from a successful envelope; raise CatalogApiError otherwise."""
    if not isinstance(raw, dict):
        raise EnvelopeError("Malformed API response envelope", status=status, payload=_as_payload(raw))
    try:
        envelope = ApiEnvelope[Any].model_validate(raw)
    except ValidationError as exc:
        raise EnvelopeError(f"Malformed API response envelope: {exc}", status=status, payload=raw) from exc
    if not envelope.success:
        message = envelope.error or envelope.message or "API request failed"
        raise CatalogApiError(message, status=status, payload=raw)
    return envelope.data


def parse_product(data: Any, *, status: Optional[int] = None) -> Product:
    if not isinstance(data, dict):
        raise EnvelopeError("Expected a product object in response data", status=status, payload=_as_payload(data))
    try:
        return Product.model_validate(data)
    except ValidationError as exc:
        raise EnvelopeError(f"Product validation failed: {exc}", status=status, payload=data) from exc


def parse_product_list(data: Any, *, status: Optional[int] = None) -> List[Product]:
    if not isinstance(data, list):
        raise EnvelopeError("Expected a product list in response data", status=status, payload=_as_payload(data))
    return [parse_product(item, status=status) for item in data]


def _as_payload(raw: Any) -> Dict[str, Any]:
    return raw if isinstance(raw, dict) else {"raw": raw}
