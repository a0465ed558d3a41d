"""
Contracts (data models).

This folder defines the request/response shapes for the catalog backend API.
Both mock and real HTTP clients use these contracts, so the catalog
synchronizer relies on stable models rather than ad-hoc dicts.
"""

from .catalog_api import (
    ApiEnvelope,
    CatalogApi,
    ProductCreateRequest,
    StockUpdateRequest,
    VariantInput,
)

__all__ = [
    "ApiEnvelope",
    "CatalogApi",
    "ProductCreateRequest",
    "StockUpdateRequest",
    "VariantInput",
]
