"""
Backend services behind the storefront CRUD API.
"""

from .product_service import ProductNotFoundError, ProductService, ProductValidationError

__all__ = ["ProductNotFoundError", "ProductService", "ProductValidationError"]
