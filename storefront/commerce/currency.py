"""
Currency table and currency detection.

The table is built once from configuration and never mutated. Detection is a
best-effort heuristic over locale and timezone signals:

    locale region -> timezone substrings -> default currency

Every step is a plain function returning a definite code, so detection can
degrade but never fail.
"""

from __future__ import annotations

import locale
import logging
import os
from typing import Dict, Iterable, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from storefront.utils.config_loader import CurrenciesConfig

logger = logging.getLogger(__name__)


class Currency(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    symbol: str
    rate: float
    flag: str = ""
    decimal_places: int = 2
    format_style: str = "prefix"


class CurrencyTable:
    """Immutable lookup of currency code -> Currency plus the country -> currency map."""

    def __init__(
        self,
        currencies: Iterable[Currency],
        country_map: Mapping[str, str],
        default_code: str = "USD",
    ) -> None:
        self._currencies: Dict[str, Currency] = {c.code: c for c in currencies}
        if default_code not in self._currencies:
            raise ValueError(f"Default currency '{default_code}' is not in the table")
        self._country_map: Dict[str, str] = {
            country.upper(): code for country, code in country_map.items() if code in self._currencies
        }
        self.default_code = default_code

    @classmethod
    def from_config(cls, cfg: CurrenciesConfig) -> "CurrencyTable":
        currencies = [
            Currency(
                code=code,
                symbol=entry.symbol,
                rate=entry.rate,
                flag=entry.flag,
                decimal_places=entry.decimal_places,
                format_style=entry.format_style,
            )
            for code, entry in cfg.table.items()
        ]
        return cls(currencies, cfg.country_map, default_code=cfg.default)

    @property
    def codes(self) -> Tuple[str, ...]:
        return tuple(self._currencies)

    @property
    def default(self) -> Currency:
        return self._currencies[self.default_code]

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code in self._currencies

    def lookup(self, code: Optional[str]) -> Optional[Currency]:
        if not code:
            return None
        return self._currencies.get(code)

    def get(self, code: Optional[str]) -> Currency:
        """Like lookup, but falls back to the default currency."""
        return self.lookup(code) or self.default

    def currency_for_country(self, country: Optional[str]) -> Optional[str]:
        if not country:
            return None
        return self._country_map.get(country.upper())

    def country_for_currency(self, code: Optional[str]) -> Optional[str]:
        """First country mapped to the currency, in table order."""
        for country, mapped in self._country_map.items():
            if mapped == code:
                return country
        return None


# ---------------------------------------------------------------------------
# Detection
# ---------------------------------------------------------------------------

def parse_locale_region(locale_tag: Optional[str]) -> Optional[str]:
    """
    Extract the region from "en-US", "en_GB.UTF-8" or "hi_IN@latin".

    Returns None when the tag has no region part.
    """
    if not locale_tag or not isinstance(locale_tag, str):
        return None
    tag = locale_tag.strip().split(".", 1)[0].split("@", 1)[0]
    parts = tag.replace("_", "-").split("-")
    if len(parts) < 2:
        return None
    region = parts[1].strip().upper()
    return region or None


def currency_from_locale(locale_tag: Optional[str], table: CurrencyTable) -> Optional[str]:
    return table.currency_for_country(parse_locale_region(locale_tag))


def currency_from_timezone(timezone: Optional[str], table: CurrencyTable) -> Optional[str]:
    if not timezone or not isinstance(timezone, str):
        return None

    candidate: Optional[str] = None
    if "America" in timezone:
        candidate = "CAD" if ("Toronto" in timezone or "Vancouver" in timezone) else "USD"
    elif "Europe" in timezone:
        candidate = "GBP" if "London" in timezone else "EUR"
    elif "Asia" in timezone:
        if "Kolkata" in timezone or "Mumbai" in timezone:
            candidate = "INR"
        elif "Riyadh" in timezone:
            candidate = "SAR"

    # the heuristic may name a currency a trimmed table doesn't carry
    return candidate if candidate in table else None


def detect_currency(
    locale_tag: Optional[str],
    timezone: Optional[str],
    table: CurrencyTable,
) -> str:
    """Return a currency code for the given signals; always a key of ``table``."""
    try:
        code = currency_from_locale(locale_tag, table)
        if code:
            return code
        code = currency_from_timezone(timezone, table)
        if code:
            return code
    except Exception as exc:  # pragma: no cover - heuristics must not break startup
        logger.warning("Currency detection failed, using default: %s", exc)
    return table.default_code


def system_locale_signals() -> Tuple[Optional[str], Optional[str]]:
    """Locale tag and timezone name for the current process."""
    locale_tag = os.getenv("STOREFRONT_LOCALE") or os.getenv("LC_ALL") or os.getenv("LANG")
    if not locale_tag:
        try:
            locale_tag = locale.getlocale()[0]
        except ValueError:
            locale_tag = None
    timezone = os.getenv("TZ")
    return locale_tag, timezone
