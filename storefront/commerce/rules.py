"""
Commerce rules resolver.

Converts USD base prices into display currencies and derives shipping cost,
free-shipping eligibility, payment methods and cash-on-delivery eligibility
from static rule tables.

Every public method is side-effect free and never raises for unknown
currencies or countries; missing data resolves to the configured default
record instead.
"""

from __future__ import annotations

import logging
import math
from decimal import ROUND_CEILING, ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Dict, FrozenSet, List, Optional, TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from storefront.commerce.currency import Currency, CurrencyTable
from storefront.utils.config_loader import CommerceConfig, CurrencyShippingEntry, ShippingRateEntry

if TYPE_CHECKING:  # pragma: no cover
    from storefront.catalog.models import Product

logger = logging.getLogger(__name__)

DEFAULT_SHIPPING_RECORD = "default"
WILDCARD_COUNTRY = "ALL"
FALLBACK_SYMBOL = "$"


class ShippingInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    free_shipping_threshold: float
    delivery_time: str
    cod_available: bool


class ShippingQuote(BaseModel):
    model_config = ConfigDict(frozen=True)

    cost: float
    is_free: bool
    estimated_days: int


class PaymentMethod(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    icon: str = ""
    description: str = ""
    countries: tuple = ()
    cod_supported: bool = False


class ProductPricing(BaseModel):
    """Display prices for one product in one currency."""

    currency: str
    price: float
    original_price: float
    formatted_price: str
    formatted_original_price: str
    discount_percent: int


def _to_decimal(value: Any) -> Optional[Decimal]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    if not number.is_finite():
        return None
    return number


def _group_indian(digits: str) -> str:
    """1234567 -> 12,34,567 (lakh/crore grouping)."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups: List[str] = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


class CommerceResolver:
    """Pure rule evaluation over the currency table and commerce configuration."""

    def __init__(self, currencies: CurrencyTable, commerce: CommerceConfig) -> None:
        self.currencies = currencies
        self._currency_shipping: Dict[str, CurrencyShippingEntry] = dict(commerce.currency_shipping)
        self._shipping_rates: Dict[str, ShippingRateEntry] = {k.upper(): v for k, v in commerce.shipping_rates.items()}
        self._default_country = commerce.default_country.upper()
        self._cod_countries: FrozenSet[str] = frozenset(c.upper() for c in commerce.cod_countries)
        self._payment_methods: List[PaymentMethod] = [
            PaymentMethod(
                id=m.id,
                name=m.name,
                icon=m.icon,
                description=m.description,
                countries=tuple(c.upper() for c in m.countries),
                cod_supported=m.cod_supported,
            )
            for m in commerce.payment_methods
        ]

    # ------------------------------------------------------------------
    # Currency
    # ------------------------------------------------------------------

    def convert(self, usd_amount: float, currency_code: Optional[str]) -> float:
        currency = self.currencies.lookup(currency_code)
        amount = _to_decimal(usd_amount)
        if currency is None or amount is None:
            return usd_amount
        converted = amount * Decimal(str(currency.rate))
        return float(self._round(converted, currency))

    def format(self, amount: float, currency_code: Optional[str]) -> str:
        currency = self.currencies.lookup(currency_code)
        value = _to_decimal(amount)
        if value is None:
            value = Decimal(0)
        if currency is None:
            return f"{FALLBACK_SYMBOL}{value.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP):.2f}"

        rounded = self._round(value, currency)
        sign = "-" if rounded < 0 else ""
        rounded = abs(rounded)

        if currency.format_style == "indian_grouping":
            text = f"{rounded:f}"
            whole, _, fraction = text.partition(".")
            fraction = fraction.rstrip("0")
            body = _group_indian(whole) + (f".{fraction}" if fraction else "")
            return f"{sign}{currency.symbol}{body}"

        body = f"{rounded:.{currency.decimal_places}f}"
        if currency.format_style == "prefix_space":
            return f"{sign}{currency.symbol} {body}"
        return f"{sign}{currency.symbol}{body}"

    def format_usd(self, usd_amount: float, currency_code: Optional[str]) -> str:
        """Convert then format; the common path for price display."""
        return self.format(self.convert(usd_amount, currency_code), currency_code)

    @staticmethod
    def _round(amount: Decimal, currency: Currency) -> Decimal:
        quantum = Decimal(1).scaleb(-currency.decimal_places)
        return amount.quantize(quantum, rounding=ROUND_HALF_UP)

    # ------------------------------------------------------------------
    # Shipping
    # ------------------------------------------------------------------

    def shipping_info(self, currency_code: Optional[str]) -> ShippingInfo:
        entry = self._currency_shipping.get(currency_code or "") or self._currency_shipping[DEFAULT_SHIPPING_RECORD]
        return ShippingInfo(
            free_shipping_threshold=self.convert(entry.free_shipping_threshold_usd, currency_code),
            delivery_time=entry.delivery_time,
            cod_available=self.cod_eligible(entry.country) if entry.country else False,
        )

    def shipping_cost(self, country: Optional[str], order_value: float, base_shipping_days: int) -> ShippingQuote:
        rate = self._shipping_rates.get((country or "").upper()) or self._shipping_rates[self._default_country]

        value = _to_decimal(order_value) or Decimal(0)
        is_free = value >= Decimal(str(rate.threshold))
        cost = 0.0 if is_free else float(rate.cost)

        days = _to_decimal(base_shipping_days) or Decimal(0)
        scaled = days * Decimal(str(rate.multiplier))
        estimated_days = int(scaled.to_integral_value(rounding=ROUND_CEILING))

        return ShippingQuote(cost=cost, is_free=is_free, estimated_days=max(estimated_days, 0))

    # ------------------------------------------------------------------
    # Payments
    # ------------------------------------------------------------------

    def cod_eligible(self, country: Optional[str]) -> bool:
        return bool(country) and country.upper() in self._cod_countries

    def available_payment_methods(self, country: Optional[str]) -> List[PaymentMethod]:
        key = (country or "").upper()
        methods = []
        for method in self._payment_methods:
            if key not in method.countries and WILDCARD_COUNTRY not in method.countries:
                continue
            if method.cod_supported and not self.cod_eligible(key):
                continue
            methods.append(method)
        return methods

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    def price_product(self, product: "Product", currency_code: Optional[str]) -> ProductPricing:
        price = self.convert(product.base_price, currency_code)
        original = self.convert(product.original_price, currency_code)
        discount = 0
        if product.original_price > 0 and product.original_price > product.base_price:
            ratio = (product.original_price - product.base_price) / product.original_price
            discount = int(math.floor(ratio * 100 + 0.5))
        code = currency_code if currency_code in self.currencies else self.currencies.default_code
        return ProductPricing(
            currency=code,
            price=price,
            original_price=original,
            formatted_price=self.format(price, currency_code),
            formatted_original_price=self.format(original, currency_code),
            discount_percent=discount,
        )
