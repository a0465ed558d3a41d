"""
Configuration loader for the storefront (currencies, commerce rules, storage keys, API client).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "storefront_config.yml"


class CurrencyEntry(BaseModel):
    """One row of the currency table as written in YAML"""

    symbol: str
    flag: str = ""
    rate: float = Field(gt=0)
    decimal_places: int = Field(default=2, ge=0, le=4)
    format_style: Literal["prefix", "prefix_space", "indian_grouping"] = "prefix"


class CurrenciesConfig(BaseModel):
    default: str = "USD"
    table: Dict[str, CurrencyEntry]
    country_map: Dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _default_must_exist(self) -> "CurrenciesConfig":
        if self.default not in self.table:
            raise ValueError(f"Default currency '{self.default}' is not in the currency table")
        unknown = sorted({code for code in self.country_map.values() if code not in self.table})
        if unknown:
            raise ValueError(f"country_map references unknown currencies: {', '.join(unknown)}")
        return self


class CurrencyShippingEntry(BaseModel):
    country: Optional[str] = None
    free_shipping_threshold_usd: float = Field(ge=0)
    delivery_time: str


class ShippingRateEntry(BaseModel):
    threshold: float = Field(ge=0)
    cost: float = Field(ge=0)
    multiplier: float = Field(gt=0)


class PaymentMethodEntry(BaseModel):
    id: str
    name: str
    icon: str = ""
    description: str = ""
    countries: List[str] = Field(default_factory=list)
    cod_supported: bool = False


class CommerceConfig(BaseModel):
    cod_countries: List[str] = Field(default_factory=list)
    default_country: str = "US"
    currency_shipping: Dict[str, CurrencyShippingEntry]
    shipping_rates: Dict[str, ShippingRateEntry]
    payment_methods: List[PaymentMethodEntry] = Field(default_factory=list)

    @model_validator(mode="after")
    def _fallback_records_must_exist(self) -> "CommerceConfig":
        if "default" not in self.currency_shipping:
            raise ValueError("currency_shipping needs a 'default' record")
        if self.default_country not in self.shipping_rates:
            raise ValueError(f"shipping_rates needs a record for default country '{self.default_country}'")
        return self


class StorageConfig(BaseModel):
    catalog_key: str = "fankick-products"
    currency_key: str = "fankick-currency"
    country_key: str = "fankick-country"


class ApiClientConfig(BaseModel):
    base_url: str = "http://localhost:8000/api"
    timeout_seconds: float = Field(default=30.0, gt=0)
    read_retries: int = Field(default=1, ge=0, le=10)
    write_retries: int = Field(default=2, ge=0, le=10)
    backoff_base_seconds: float = Field(default=1.0, ge=0)
    backoff_max_seconds: float = Field(default=5.0, ge=0)


class StorefrontConfig(BaseModel):
    """Complete storefront configuration"""

    currencies: CurrenciesConfig
    commerce: CommerceConfig
    storage: StorageConfig = Field(default_factory=StorageConfig)
    api_client: ApiClientConfig = Field(default_factory=ApiClientConfig)


def load_storefront_config(config_path: Optional[Path] = None) -> StorefrontConfig:
    """
    Load and validate storefront configuration from YAML file

    Args:
        config_path: Path to config file. Defaults to config/storefront_config.yml

    Returns:
        Validated StorefrontConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        raise FileNotFoundError(f"Storefront config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    try:
        cfg = StorefrontConfig(**data)
        logger.info("Successfully loaded storefront config from %s", config_path)
        return cfg
    except ValidationError as e:
        logger.error("Storefront config validation failed: %s", e)
        raise
