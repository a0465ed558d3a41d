"""Tests for the product service backing the CRUD API."""

import json

import pytest

from storefront.services.product_service import (
    ProductNotFoundError,
    ProductService,
    ProductValidationError,
    generate_product_id,
    generate_sku,
)


def test_file_backed_service_seeds_missing_file(tmp_path):
    db_path = tmp_path / "data" / "products.json"

    service = ProductService(db_path=db_path)

    assert db_path.exists()
    assert len(json.loads(db_path.read_text(encoding="utf-8"))) == len(service.list_products()) == 9


def test_file_backed_service_reloads_changes(tmp_path):
    db_path = tmp_path / "products.json"
    ProductService(db_path=db_path).delete_product("bts-dynamite-tshirt")

    reloaded = ProductService(db_path=db_path)

    assert reloaded.get_product("bts-dynamite-tshirt") is None
    assert len(reloaded.list_products()) == 8


@pytest.mark.parametrize("content", ["[]", "{not json"])
def test_empty_or_corrupt_file_is_reseeded(tmp_path, content):
    db_path = tmp_path / "products.json"
    db_path.write_text(content, encoding="utf-8")

    service = ProductService(db_path=db_path)

    assert len(service.list_products()) == 9


def test_query_precedence_trending_over_category_over_search():
    service = ProductService()

    trending = service.query(category="anime", search="hoodie", trending=True)
    assert all(p.is_trending for p in trending)

    by_category = service.query(category="anime", search="messi")
    assert {p.category for p in by_category} == {"anime"}

    assert [p.id for p in service.query(search="messi", limit=1)] == ["messi-inter-miami-jersey"]


def test_search_covers_category_subcategory_and_brand():
    service = ProductService()

    assert {p.id for p in service.search_products("necklaces")} == {"demon-slayer-necklace"}
    assert {p.id for p in service.search_products("NIKE")} == {"ronaldo-al-nassr-jersey"}
    assert len(service.search_products("pop-culture")) == 3


def test_create_from_dict_validates_shape():
    service = ProductService()

    with pytest.raises(ProductValidationError, match="Invalid product"):
        service.create_product(
            {"name": "x", "description": "y", "category": "not-a-category", "basePrice": 1, "originalPrice": 1}
        )


def test_update_unknown_product_raises():
    with pytest.raises(ProductNotFoundError):
        ProductService().update_product("nope", {"name": "x"})


def test_update_with_invalid_field_raises_validation_error():
    with pytest.raises(ProductValidationError):
        ProductService().update_product("messi-inter-miami-jersey", {"category": "cars"})


def test_update_stock_requires_non_negative_int():
    service = ProductService()

    with pytest.raises(ProductValidationError):
        service.update_stock("messi-inter-miami-jersey", "messi-m", -3)
    with pytest.raises(ProductValidationError):
        service.update_stock("messi-inter-miami-jersey", "messi-m", True)

    assert service.update_stock("messi-inter-miami-jersey", "messi-m", 7) is True
    assert service.get_product("messi-inter-miami-jersey").variant("messi-m").stock == 7
    assert service.update_stock("messi-inter-miami-jersey", "nope", 7) is False


def test_generated_identifiers():
    assert generate_product_id().startswith("product_")
    assert generate_product_id() != generate_product_id()

    sku = generate_sku("Naruto Ring!", size="M", color="Dark Red")
    prefix, suffix = sku.rsplit("-", 1)
    assert prefix == "NARUTO-M-DarkRed"
    assert len(suffix) == 4 and suffix.isdigit()
