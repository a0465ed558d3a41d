"""
Commerce rules: currency table and detection, price conversion and
formatting, shipping and payment eligibility.
"""

from .context import CommerceContext
from .currency import Currency, CurrencyTable, detect_currency, system_locale_signals
from .rules import CommerceResolver, PaymentMethod, ProductPricing, ShippingInfo, ShippingQuote

__all__ = [
    "CommerceContext",
    "CommerceResolver",
    "Currency",
    "CurrencyTable",
    "PaymentMethod",
    "ProductPricing",
    "ShippingInfo",
    "ShippingQuote",
    "detect_currency",
    "system_locale_signals",
]
