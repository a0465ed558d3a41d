"""Pytest fixtures for the storefront catalog cache and commerce rules."""

import pytest

from storefront.catalog.cache import CatalogCache
from storefront.catalog.models import Product, ProductVariant
from storefront.commerce.currency import CurrencyTable
from storefront.commerce.rules import CommerceResolver
from storefront.storage.memory import InMemoryKeyValueStore
from storefront.storage.ports import KeyValueSnapshotPort
from storefront.utils.config_loader import load_storefront_config

CATALOG_KEY = "fankick-products"


@pytest.fixture(scope="session")
def config():
    return load_storefront_config()


@pytest.fixture
def currencies(config):
    return CurrencyTable.from_config(config.currencies)


@pytest.fixture
def resolver(config, currencies):
    return CommerceResolver(currencies, config.commerce)


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def snapshot_port(store):
    return KeyValueSnapshotPort(store, CATALOG_KEY)


@pytest.fixture
def catalog(snapshot_port):
    return CatalogCache(snapshot_port)


def make_product(product_id: str = "custom-scarf", **overrides) -> Product:
    data = dict(
        id=product_id,
        name="Custom Club Scarf",
        description="Knitted supporter scarf in club colours.",
        category="football",
        subcategory="scarves",
        images=["/placeholder.svg"],
        variants=[
            ProductVariant(id=f"{product_id}-one", size="One Size", price=19.99, original_price=24.99, stock=10, sku="SCARF-1")
        ],
        base_price=19.99,
        original_price=24.99,
        rating=4.2,
        reviews=12,
        tags=["Scarf", "Winter"],
        badges=["New"],
        shipping_days=5,
        cod_available=True,
        is_trending=False,
        is_exclusive=False,
    )
    data.update(overrides)
    return Product(**data)


@pytest.fixture
def product_factory():
    return make_product
