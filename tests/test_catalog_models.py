from storefront.catalog.models import Product


WIRE_PRODUCT = {
    "id": "p1",
    "name": "Retro Scarf",
    "description": "Knitted scarf",
    "category": "football",
    "subcategory": "scarves",
    "images": ["/a.png"],
    "variants": [
        {"id": "v1", "size": "One Size", "price": 10.0, "originalPrice": 12.0, "stock": 0, "sku": "SCARF-1"},
        {"id": "v2", "color": "Red", "price": 10.0, "originalPrice": 12.0, "stock": 3, "sku": "SCARF-2"},
    ],
    "basePrice": 10.0,
    "originalPrice": 12.0,
    "rating": 4.1,
    "reviews": 3,
    "tags": ["Scarf"],
    "badges": [],
    "shippingDays": 4,
    "codAvailable": False,
    "isTrending": True,
    "isExclusive": False,
    "sizeGuide": {"sizes": ["One Size"], "measurements": {"One Size": "150cm"}},
}


def test_wire_shape_is_preserved():
    product = Product.from_wire(WIRE_PRODUCT)

    assert product.base_price == 10.0
    assert product.size_guide.measurements == {"One Size": "150cm"}
    assert product.to_wire() == WIRE_PRODUCT


def test_stock_helpers():
    product = Product.from_wire(WIRE_PRODUCT)

    assert product.total_stock == 3
    assert product.is_purchasable is True
    assert product.variant("v2").color == "Red"
    assert product.variant("nope") is None
    assert product.price_warnings() == []


def test_price_warnings_flag_inconsistent_entries():
    product = Product.from_wire({**WIRE_PRODUCT, "basePrice": 15.0, "variants": []})

    warnings = product.price_warnings()

    assert any("basePrice" in w for w in warnings)
    assert any("no variants" in w for w in warnings)
    assert product.is_purchasable is False
