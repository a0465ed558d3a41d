"""
Session commerce context: the selected currency and shipping country.

Constructed once per session and passed to whatever needs prices or checkout
rules. The currency code is the piece of state that must survive reloads:
the first run detects and stores it, later runs read it back without
re-detecting. An explicit selection overrides and is persisted too.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from storefront.commerce.currency import Currency, CurrencyTable, detect_currency, parse_locale_region
from storefront.commerce.rules import CommerceResolver, PaymentMethod, ShippingInfo, ShippingQuote
from storefront.storage.ports import KeyValueStore, StorageError
from storefront.utils.config_loader import StorageConfig

logger = logging.getLogger(__name__)


class CommerceContext:
    def __init__(
        self,
        resolver: CommerceResolver,
        store: KeyValueStore,
        storage: Optional[StorageConfig] = None,
        locale_tag: Optional[str] = None,
        timezone: Optional[str] = None,
        default_country: str = "US",
    ) -> None:
        self.resolver = resolver
        self.store = store
        self.keys = storage or StorageConfig()
        self.locale_tag = locale_tag
        self.timezone = timezone
        self.default_country = default_country
        self._currency_code: Optional[str] = None
        self._country: Optional[str] = None

    @property
    def currencies(self) -> CurrencyTable:
        return self.resolver.currencies

    # ------------------------------------------------------------------
    # Currency
    # ------------------------------------------------------------------

    @property
    def currency_code(self) -> str:
        if self._currency_code is None:
            self._currency_code = self._resolve_currency()
        return self._currency_code

    @property
    def currency(self) -> Currency:
        return self.currencies.get(self.currency_code)

    def _resolve_currency(self) -> str:
        stored = self._read(self.keys.currency_key)
        if stored and stored in self.currencies:
            return stored
        if stored:
            logger.info("Stored currency '%s' is no longer supported; detecting again", stored)

        detected = detect_currency(self.locale_tag, self.timezone, self.currencies)
        logger.info("Detected currency %s (locale=%s, timezone=%s)", detected, self.locale_tag, self.timezone)
        self._write(self.keys.currency_key, detected)
        return detected

    def set_currency(self, code: str) -> bool:
        """Select a currency. Unknown codes are ignored and return False."""
        if code not in self.currencies:
            logger.warning("Ignoring unsupported currency selection '%s'", code)
            return False
        self._currency_code = code
        self._write(self.keys.currency_key, code)
        return True

    # ------------------------------------------------------------------
    # Country
    # ------------------------------------------------------------------

    @property
    def country(self) -> str:
        if self._country is None:
            self._country = self._resolve_country()
        return self._country

    def _resolve_country(self) -> str:
        stored = self._read(self.keys.country_key)
        if stored:
            return stored.upper()
        region = parse_locale_region(self.locale_tag)
        if region:
            return region
        return self.currencies.country_for_currency(self.currency_code) or self.default_country

    def set_country(self, country: str) -> None:
        if not country:
            return
        self._country = country.upper()
        self._write(self.keys.country_key, self._country)

    # ------------------------------------------------------------------
    # Derived decisions
    # ------------------------------------------------------------------

    def display_price(self, usd_amount: float) -> str:
        return self.resolver.format_usd(usd_amount, self.currency_code)

    def convert(self, usd_amount: float) -> float:
        return self.resolver.convert(usd_amount, self.currency_code)

    def shipping_info(self) -> ShippingInfo:
        return self.resolver.shipping_info(self.currency_code)

    def shipping_cost(self, order_value: float, base_shipping_days: int) -> ShippingQuote:
        return self.resolver.shipping_cost(self.country, order_value, base_shipping_days)

    def shipping_cost_for_usd(self, usd_order_value: float, base_shipping_days: int) -> ShippingQuote:
        """Quote shipping for an order priced in USD; thresholds are in the session currency."""
        return self.shipping_cost(self.convert(usd_order_value), base_shipping_days)

    def payment_methods(self) -> List[PaymentMethod]:
        return self.resolver.available_payment_methods(self.country)

    def cod_eligible(self) -> bool:
        return self.resolver.cod_eligible(self.country)

    # ------------------------------------------------------------------
    # Storage helpers
    # ------------------------------------------------------------------

    def _read(self, key: str) -> Optional[str]:
        try:
            return self.store.get(key)
        except StorageError as exc:
            logger.warning("Could not read '%s': %s", key, exc)
            return None

    def _write(self, key: str, value: str) -> None:
        try:
            self.store.set(key, value)
        except StorageError as exc:
            logger.warning("Could not persist '%s'; keeping it for this session only: %s", key, exc)
