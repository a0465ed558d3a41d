"""
Integrations layer.
This package contains all code used to communicate with the catalog backend.

Key rule:
- The catalog cache MUST NOT call the backend directly.
- The catalog synchronizer calls integration clients (under storefront/integrations/clients).
- We use the LOCAL mock client during development and swap to the REAL_HTTP client
  when a backend URL is configured.

Switching implementations:
- The selection of mock vs real clients happens in ONE place (storefront/bootstrap.py).
"""

from .contracts import ApiEnvelope, CatalogApi, ProductCreateRequest, StockUpdateRequest, VariantInput
from .response_wrappers import (
    CatalogApiError,
    CatalogApiNetworkError,
    CatalogApiTimeoutError,
    EnvelopeError,
    unwrap_envelope,
)

__all__ = [
    "ApiEnvelope", "CatalogApi", "ProductCreateRequest", "StockUpdateRequest", "VariantInput",
    "CatalogApiError", "CatalogApiNetworkError", "CatalogApiTimeoutError", "EnvelopeError",
    "unwrap_envelope",
]
