"""
Product catalog: models, bundled defaults and the client-side catalog cache.

The backend synchronizer lives in storefront.catalog.sync.
"""

from .cache import CatalogCache, CatalogError, CatalogOrigin, CatalogState, DuplicateProductError
from .defaults import DEFAULT_PRODUCTS, default_products
from .models import CATEGORIES, Product, ProductVariant, SizeGuide

__all__ = [
    "CATEGORIES",
    "CatalogCache",
    "CatalogError",
    "CatalogOrigin",
    "CatalogState",
    "DEFAULT_PRODUCTS",
    "DuplicateProductError",
    "Product",
    "ProductVariant",
    "SizeGuide",
    "default_products",
]
