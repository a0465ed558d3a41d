"""
Application context.

Builds every long-lived collaborator once and hands them out explicitly;
nothing in the package looks up a module-level singleton. Backend selection
happens here and only here:

- storage: Redis when REDIS_URL is set, a JSON file when STOREFRONT_STATE_FILE
  is set, otherwise in-memory
- catalog backend: the real HTTP client when INTEGRATIONS_MODE=real (or
  STOREFRONT_API_URL is set), otherwise the in-process local client
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from storefront.catalog.cache import CatalogCache
from storefront.catalog.sync import CatalogSynchronizer
from storefront.commerce.context import CommerceContext
from storefront.commerce.currency import CurrencyTable, system_locale_signals
from storefront.commerce.rules import CommerceResolver
from storefront.integrations.contracts.catalog_api import CatalogApi
from storefront.storage.ports import KeyValueSnapshotPort, KeyValueStore
from storefront.utils.config_loader import StorefrontConfig, load_storefront_config

logger = logging.getLogger(__name__)


@dataclass
class StorefrontContext:
    config: StorefrontConfig
    store: KeyValueStore
    currencies: CurrencyTable
    resolver: CommerceResolver
    commerce: CommerceContext
    catalog: CatalogCache
    api: CatalogApi
    sync: CatalogSynchronizer


def _should_use_real_backend() -> bool:
    mode = os.getenv("INTEGRATIONS_MODE", "").strip().lower()
    if mode in {"real", "live"}:
        return True
    if mode in {"mock", "local", "test"}:
        return False
    return bool(os.getenv("STOREFRONT_API_URL"))


def build_store() -> KeyValueStore:
    if os.getenv("REDIS_URL"):
        from storefront.storage.redis_real import RedisKeyValueStore

        logger.info("Client state stored in Redis")
        return RedisKeyValueStore(url=os.environ["REDIS_URL"])

    if os.getenv("STOREFRONT_STATE_FILE"):
        from storefront.storage.file_store import JsonFileKeyValueStore

        path = Path(os.environ["STOREFRONT_STATE_FILE"])
        logger.info("Client state stored in %s", path)
        return JsonFileKeyValueStore(path)

    from storefront.storage.memory import InMemoryKeyValueStore

    logger.info("Client state kept in memory")
    return InMemoryKeyValueStore()


def build_api_client(config: StorefrontConfig) -> CatalogApi:
    if _should_use_real_backend():
        from storefront.integrations.clients.real_http.catalog_api import CatalogApiClient

        return CatalogApiClient.from_config(config.api_client)

    from storefront.integrations.clients.mocks.local_catalog_api import LocalCatalogApiClient

    return LocalCatalogApiClient()


def build_context(
    config: Optional[StorefrontConfig] = None,
    store: Optional[KeyValueStore] = None,
    api: Optional[CatalogApi] = None,
    locale_tag: Optional[str] = None,
    timezone: Optional[str] = None,
) -> StorefrontContext:
    """Construct the storefront once per session; arguments override environment-driven choices."""
    config = config or load_storefront_config()
    store = store or build_store()
    api = api or build_api_client(config)

    if locale_tag is None and timezone is None:
        locale_tag, timezone = system_locale_signals()

    currencies = CurrencyTable.from_config(config.currencies)
    resolver = CommerceResolver(currencies, config.commerce)
    commerce = CommerceContext(
        resolver,
        store,
        storage=config.storage,
        locale_tag=locale_tag,
        timezone=timezone,
        default_country=config.commerce.default_country,
    )
    catalog = CatalogCache(KeyValueSnapshotPort(store, config.storage.catalog_key))

    return StorefrontContext(
        config=config,
        store=store,
        currencies=currencies,
        resolver=resolver,
        commerce=commerce,
        catalog=catalog,
        api=api,
        sync=CatalogSynchronizer(catalog, api),
    )
