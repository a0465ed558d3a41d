"""Tests for the httpx catalog API client: envelope handling, retries and error mapping."""

import json

import httpx
import pytest

from storefront.api.main import create_app
from storefront.catalog.defaults import DEFAULT_PRODUCTS
from storefront.integrations.clients.real_http.catalog_api import CatalogApiClient
from storefront.integrations.contracts.catalog_api import ProductCreateRequest, VariantInput
from storefront.integrations.response_wrappers import (
    CatalogApiError,
    CatalogApiNetworkError,
    CatalogApiTimeoutError,
    EnvelopeError,
    unwrap_envelope,
)
from storefront.services.product_service import ProductService

PRODUCT_WIRE = DEFAULT_PRODUCTS[0].to_wire()


class Recorder:
    """Scripted transport handler; replays responses in order and records requests."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(response, Exception):
            raise response
        return response


def make_client(handler, **kwargs):
    delays = []

    async def fake_sleep(seconds):
        delays.append(seconds)

    client = CatalogApiClient(
        base_url="http://api.test/api",
        transport=httpx.MockTransport(handler),
        sleep=fake_sleep,
        **kwargs,
    )
    return client, delays


def envelope(data=None, status=200, **extra):
    body = {"success": True, **extra}
    if data is not None:
        body["data"] = data
    return httpx.Response(status, json=body)


def failure(status, error="boom"):
    return httpx.Response(status, json={"success": False, "error": error})


def scarf_request():
    return ProductCreateRequest(
        name="Club Scarf",
        description="Knitted supporter scarf.",
        category="football",
        variants=[VariantInput(size="One Size", price=19.99, original_price=24.99, stock=4)],
        base_price=19.99,
        original_price=24.99,
    )


def test_defaults_come_from_config(config):
    client = CatalogApiClient.from_config(config.api_client)
    assert client.timeout_seconds == 30
    assert client.read_retries == 1
    assert client.write_retries == 2


@pytest.mark.asyncio
async def test_get_product_unwraps_envelope():
    handler = Recorder(envelope(PRODUCT_WIRE))
    client, _ = make_client(handler)

    product = await client.get_product(PRODUCT_WIRE["id"])

    assert product == DEFAULT_PRODUCTS[0]
    assert str(handler.requests[0].url) == f"http://api.test/api/products/{PRODUCT_WIRE['id']}"


@pytest.mark.asyncio
async def test_list_products_sends_filters_and_auth_header():
    handler = Recorder(envelope([PRODUCT_WIRE]))
    client, _ = make_client(handler, api_key="secret")

    products = await client.list_products(category="football", trending=True, limit=3)

    assert [p.id for p in products] == [PRODUCT_WIRE["id"]]
    request = handler.requests[0]
    assert request.url.params["category"] == "football"
    assert request.url.params["trending"] == "true"
    assert request.url.params["limit"] == "3"
    assert request.headers["Authorization"] == "Bearer secret"


@pytest.mark.asyncio
async def test_write_retries_server_errors_with_backoff():
    handler = Recorder(failure(500), envelope(PRODUCT_WIRE, status=201))
    client, delays = make_client(handler)

    product = await client.create_product(scarf_request())

    assert product.id == PRODUCT_WIRE["id"]
    assert len(handler.requests) == 2
    assert delays == [1.0]


@pytest.mark.asyncio
async def test_write_gives_up_after_two_retries():
    handler = Recorder(failure(503))
    client, delays = make_client(handler)

    with pytest.raises(CatalogApiError) as exc_info:
        await client.update_product("messi-inter-miami-jersey", {"name": "x"})

    assert exc_info.value.status == 503
    assert exc_info.value.message == "boom"
    assert len(handler.requests) == 3
    assert delays == [1.0, 2.0]


@pytest.mark.asyncio
async def test_read_retries_once():
    handler = Recorder(failure(500))
    client, delays = make_client(handler)

    with pytest.raises(CatalogApiError):
        await client.list_products()

    assert len(handler.requests) == 2
    assert delays == [1.0]


@pytest.mark.asyncio
async def test_backoff_is_capped():
    handler = Recorder(failure(500))
    client, delays = make_client(handler, write_retries=4, backoff_max_seconds=3.0)

    with pytest.raises(CatalogApiError):
        await client.create_product(scarf_request())

    assert delays == [1.0, 2.0, 3.0, 3.0]


@pytest.mark.asyncio
async def test_client_errors_are_not_retried():
    handler = Recorder(failure(400, "At least one product variant is required"))
    client, delays = make_client(handler)

    with pytest.raises(CatalogApiError) as exc_info:
        await client.create_product(scarf_request())

    assert exc_info.value.status == 400
    assert exc_info.value.is_client_error
    assert "variant" in str(exc_info.value)
    assert len(handler.requests) == 1
    assert delays == []


@pytest.mark.asyncio
async def test_non_json_error_body_reports_status():
    handler = Recorder(httpx.Response(404, text="Not Found"))
    client, _ = make_client(handler)

    with pytest.raises(CatalogApiError, match="HTTP error! status: 404"):
        await client.get_product("missing")


@pytest.mark.asyncio
async def test_unsuccessful_envelope_raises_with_server_message():
    handler = Recorder(httpx.Response(200, json={"success": False, "error": "Database offline"}))
    client, _ = make_client(handler)

    with pytest.raises(CatalogApiError, match="Database offline"):
        await client.get_product("messi-inter-miami-jersey")


@pytest.mark.asyncio
async def test_malformed_envelope_raises_envelope_error():
    handler = Recorder(httpx.Response(200, json=[PRODUCT_WIRE]))
    client, _ = make_client(handler, read_retries=0)

    with pytest.raises(EnvelopeError):
        await client.list_products()


@pytest.mark.asyncio
async def test_timeout_is_typed_and_not_retried():
    handler = Recorder(httpx.ReadTimeout("timed out"))
    client, delays = make_client(handler)

    with pytest.raises(CatalogApiTimeoutError):
        await client.create_product(scarf_request())

    assert len(handler.requests) == 1
    assert delays == []


@pytest.mark.asyncio
async def test_connection_failure_is_a_network_error():
    handler = Recorder(httpx.ConnectError("connection refused"))
    client, _ = make_client(handler)

    with pytest.raises(CatalogApiNetworkError, match="Network error"):
        await client.list_products()


@pytest.mark.asyncio
async def test_delete_and_stock_update_accept_empty_data():
    handler = Recorder(envelope(message="ok"))
    client, _ = make_client(handler)

    assert await client.delete_product("messi-inter-miami-jersey") is None
    assert await client.update_stock("messi-inter-miami-jersey", "messi-m", 4) is None
    assert json.loads(handler.requests[1].content) == {"variantId": "messi-m", "stock": 4}


@pytest.mark.asyncio
async def test_crud_round_trip_against_fastapi_app():
    app = create_app(ProductService())
    client = CatalogApiClient(base_url="http://testserver/api", transport=httpx.ASGITransport(app=app))

    created = await client.create_product(scarf_request())
    assert created.rating == 4.5
    assert created.variants[0].sku

    updated = await client.update_product(created.id, {"name": "Club Scarf II"})
    assert updated.name == "Club Scarf II"

    await client.update_stock(created.id, created.variants[0].id, 0)
    fetched = await client.get_product(created.id)
    assert fetched.variants[0].stock == 0
    assert not fetched.is_purchasable

    trending = await client.get_trending(limit=2)
    assert len(trending) == 2

    await client.delete_product(created.id)
    with pytest.raises(CatalogApiError) as exc_info:
        await client.get_product(created.id)
    assert exc_info.value.status == 404


def test_unwrap_envelope_validates_shape():
    assert unwrap_envelope({"success": True, "data": [1, 2]}) == [1, 2]
    assert unwrap_envelope({"success": True, "message": "Stock updated successfully"}) is None

    with pytest.raises(EnvelopeError):
        unwrap_envelope({"data": PRODUCT_WIRE}, status=200)
    with pytest.raises(EnvelopeError):
        unwrap_envelope({"success": True, "error": {"code": 1}}, status=200)

    with pytest.raises(CatalogApiError, match="API request failed") as exc_info:
        unwrap_envelope({"success": False}, status=200)
    assert not isinstance(exc_info.value, EnvelopeError)
