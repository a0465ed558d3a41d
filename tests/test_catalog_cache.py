"""Tests for the catalog cache: snapshot restore, seeding and persisted mutations."""

import json
import logging

import pytest

from storefront.catalog.cache import CatalogCache, CatalogError, CatalogOrigin, CatalogState, DuplicateProductError
from storefront.catalog.defaults import DEFAULT_PRODUCTS
from storefront.storage.memory import InMemoryKeyValueStore
from storefront.storage.ports import KeyValueSnapshotPort

CATALOG_KEY = "fankick-products"
DEFAULT_IDS = [p.id for p in DEFAULT_PRODUCTS]


def persisted_ids(store):
    return [item["id"] for item in json.loads(store.get(CATALOG_KEY))]


def test_cache_is_lazy_until_first_access(catalog, store):
    assert catalog.state is CatalogState.UNINITIALIZED
    assert store.get(CATALOG_KEY) is None

    assert len(catalog) == len(DEFAULT_PRODUCTS)
    assert catalog.state is CatalogState.READY


def test_missing_snapshot_seeds_and_persists_defaults(catalog, store):
    assert [p.id for p in catalog.products] == DEFAULT_IDS
    assert catalog.origin is CatalogOrigin.SEEDED
    assert persisted_ids(store) == DEFAULT_IDS


@pytest.mark.parametrize("raw", ["[]", '{"products": []}', "not json{", '"just a string"'])
def test_unusable_snapshot_falls_back_to_defaults(store, snapshot_port, raw):
    store.set(CATALOG_KEY, raw)

    cache = CatalogCache(snapshot_port)

    assert [p.id for p in cache.products] == DEFAULT_IDS
    assert cache.origin is CatalogOrigin.SEEDED
    assert persisted_ids(store) == DEFAULT_IDS


def test_saved_snapshot_is_restored(store, snapshot_port, product_factory):
    scarf = product_factory()
    store.set(CATALOG_KEY, json.dumps([scarf.to_wire()]))

    cache = CatalogCache(snapshot_port)

    assert cache.products == [scarf]
    assert cache.origin is CatalogOrigin.RESTORED


def test_unreadable_entries_are_skipped_not_reseeded(store, snapshot_port, product_factory, caplog):
    scarf = product_factory()
    legacy = {**product_factory("legacy-mug").to_wire(), "category": "merch"}
    stored = json.dumps([scarf.to_wire(), legacy, "not a product"])
    store.set(CATALOG_KEY, stored)

    with caplog.at_level(logging.WARNING, logger="storefront.catalog.cache"):
        cache = CatalogCache(snapshot_port)
        products = cache.products

    assert products == [scarf]
    assert cache.origin is CatalogOrigin.RESTORED
    assert store.get(CATALOG_KEY) == stored
    assert "Skipping unreadable product at position 1" in caplog.text


def test_non_empty_list_is_never_replaced_by_defaults(store, snapshot_port):
    store.set(CATALOG_KEY, '[{"id": "x"}]')

    cache = CatalogCache(snapshot_port)

    assert cache.products == []
    assert cache.origin is CatalogOrigin.RESTORED
    assert store.get(CATALOG_KEY) == '[{"id": "x"}]'


def test_mutations_survive_a_new_cache_instance(store, snapshot_port, catalog, product_factory):
    catalog.add(product_factory())
    catalog.delete("bts-dynamite-tshirt")

    reloaded = CatalogCache(snapshot_port)

    ids = [p.id for p in reloaded.products]
    assert "custom-scarf" in ids
    assert "bts-dynamite-tshirt" not in ids
    assert reloaded.origin is CatalogOrigin.RESTORED


def test_add_then_lookup(catalog, store, product_factory):
    scarf = product_factory()

    assert catalog.add(scarf) == scarf
    assert catalog.by_id("custom-scarf") == scarf
    assert catalog.products[-1] == scarf
    assert "custom-scarf" in persisted_ids(store)


def test_add_duplicate_id_is_rejected(catalog):
    with pytest.raises(DuplicateProductError):
        catalog.add(DEFAULT_PRODUCTS[0])
    assert len(catalog) == len(DEFAULT_PRODUCTS)


def test_delete_removes_from_cache_and_snapshot(catalog, store):
    assert catalog.delete("naruto-akatsuki-ring-set") is True

    assert catalog.by_id("naruto-akatsuki-ring-set") is None
    assert "naruto-akatsuki-ring-set" not in persisted_ids(store)


def test_delete_unknown_is_a_no_op(catalog):
    assert catalog.delete("nope") is False
    assert len(catalog) == len(DEFAULT_PRODUCTS)


def test_update_replaces_in_place(catalog):
    original = catalog.by_id("ronaldo-al-nassr-jersey")
    renamed = original.model_copy(update={"name": "CR7 Away Kit"})

    assert catalog.update(renamed) == renamed
    assert catalog.products[1].name == "CR7 Away Kit"
    assert [p.id for p in catalog.products] == DEFAULT_IDS


def test_update_unknown_id_is_ignored(catalog, store, product_factory):
    catalog.load()
    before = store.get(CATALOG_KEY)

    assert catalog.update(product_factory("ghost")) is None
    assert catalog.by_id("ghost") is None
    assert store.get(CATALOG_KEY) == before


def test_update_stock_changes_one_variant(catalog, store):
    product = catalog.update_stock("messi-inter-miami-jersey", "messi-xl", 0)

    assert product.variant("messi-xl").stock == 0
    assert catalog.by_id("messi-inter-miami-jersey").variant("messi-m").stock == 12
    saved = json.loads(store.get(CATALOG_KEY))[0]
    assert next(v for v in saved["variants"] if v["id"] == "messi-xl")["stock"] == 0


def test_update_stock_rejects_negative_and_ignores_unknown(catalog):
    with pytest.raises(CatalogError):
        catalog.update_stock("messi-inter-miami-jersey", "messi-xl", -1)
    assert catalog.update_stock("messi-inter-miami-jersey", "nope", 3) is None
    assert catalog.update_stock("nope", "messi-xl", 3) is None


@pytest.mark.parametrize("stock", [2.5, "4", True, None])
def test_update_stock_rejects_non_integers_and_keeps_catalog_restorable(store, snapshot_port, catalog, product_factory, stock):
    catalog.add(product_factory())

    with pytest.raises(CatalogError):
        catalog.update_stock("custom-scarf", "custom-scarf-one", stock)

    reloaded = CatalogCache(snapshot_port)
    assert reloaded.origin is CatalogOrigin.RESTORED
    assert reloaded.by_id("custom-scarf").variant("custom-scarf-one").stock == 10


def test_queries_preserve_catalog_order(catalog):
    assert [p.id for p in catalog.by_category("anime")] == [
        "naruto-akatsuki-ring-set",
        "chainsaw-man-hoodie",
        "demon-slayer-necklace",
    ]
    assert [p.id for p in catalog.by_subcategory("jerseys")] == [
        "messi-inter-miami-jersey",
        "ronaldo-al-nassr-jersey",
    ]
    assert [p.id for p in catalog.trending()] == [
        "messi-inter-miami-jersey",
        "ronaldo-al-nassr-jersey",
        "naruto-akatsuki-ring-set",
        "taylor-swift-eras-hoodie",
        "bts-dynamite-tshirt",
    ]
    assert len(catalog.trending(limit=2)) == 2


def test_search_matches_name_description_and_tags(catalog):
    assert [p.id for p in catalog.search("HOODIE")] == [
        "chainsaw-man-hoodie",
        "taylor-swift-eras-hoodie",
        "marvel-spiderman-hoodie",
    ]
    assert [p.id for p in catalog.search("army")] == ["bts-dynamite-tshirt"]
    assert [p.id for p in catalog.search("kangaroo")] == ["chainsaw-man-hoodie"]
    assert catalog.search("zzz-no-match") == []


def test_failed_save_switches_to_memory_only():
    store = InMemoryKeyValueStore(quota_bytes=10)
    cache = CatalogCache(KeyValueSnapshotPort(store, CATALOG_KEY))

    assert len(cache) == len(DEFAULT_PRODUCTS)
    assert cache.memory_only is True
    assert store.get(CATALOG_KEY) is None

    assert cache.delete("bts-dynamite-tshirt") is True
    assert cache.by_id("bts-dynamite-tshirt") is None


def test_reset_discards_snapshot_and_reseeds(catalog, store, product_factory):
    catalog.add(product_factory())
    catalog.delete("messi-inter-miami-jersey")

    catalog.reset()

    assert [p.id for p in catalog.products] == DEFAULT_IDS
    assert catalog.origin is CatalogOrigin.RESET
    assert store.get(CATALOG_KEY) is None


def test_inconsistent_prices_are_logged_not_rejected(catalog, product_factory, caplog):
    odd = product_factory("odd-prices", base_price=30.0, original_price=20.0)

    with caplog.at_level(logging.WARNING, logger="storefront.catalog.cache"):
        catalog.add(odd)

    assert catalog.by_id("odd-prices") is not None
    assert "exceeds originalPrice" in caplog.text
