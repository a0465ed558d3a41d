"""
FanKick storefront: client-side catalog cache, commerce rules resolver and
the product CRUD API behind them.
"""

__version__ = "1.0.0"
