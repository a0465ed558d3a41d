from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Request
from fastapi.responses import JSONResponse

from storefront.services.product_service import ProductNotFoundError, ProductService, ProductValidationError

api = APIRouter()
products_api = api


def get_product_service(request: Request) -> ProductService:
    return request.app.state.product_service


def _ok(data: Any = None, message: Optional[str] = None, status_code: int = 200) -> JSONResponse:
    body: Dict[str, Any] = {"success": True}
    if data is not None:
        body["data"] = data
    if message:
        body["message"] = message
    return JSONResponse(status_code=status_code, content=body)


def _fail(error: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": error})


@api.get("")
def list_products(
    category: Optional[str] = None,
    search: Optional[str] = None,
    trending: Optional[str] = None,
    limit: Optional[int] = Query(default=None, ge=1),
    service: ProductService = Depends(get_product_service),
):
    products = service.query(
        category=category,
        search=search,
        trending=(trending or "").lower() == "true",
        limit=limit,
    )
    return _ok([p.to_wire() for p in products])


@api.get("/{product_id}")
def get_product(product_id: str, service: ProductService = Depends(get_product_service)):
    product = service.get_product(product_id)
    if product is None:
        return _fail("Product not found", 404)
    return _ok(product.to_wire())


@api.post("")
def create_product(payload: Dict[str, Any] = Body(...), service: ProductService = Depends(get_product_service)):
    try:
        product = service.create_product(payload)
    except ProductValidationError as exc:
        return _fail(str(exc), 400)
    return _ok(product.to_wire(), message="Product created successfully", status_code=201)


@api.put("/{product_id}")
def update_product(
    product_id: str,
    payload: Dict[str, Any] = Body(...),
    service: ProductService = Depends(get_product_service),
):
    try:
        product = service.update_product(product_id, payload)
    except ProductNotFoundError:
        return _fail("Product not found", 404)
    except ProductValidationError as exc:
        return _fail(str(exc), 400)
    return _ok(product.to_wire(), message="Product updated successfully")


@api.delete("/{product_id}")
def delete_product(product_id: str, service: ProductService = Depends(get_product_service)):
    if not service.delete_product(product_id):
        return _fail("Product not found", 404)
    return _ok(message="Product deleted successfully")


@api.put("/{product_id}/stock")
def update_product_stock(
    product_id: str,
    payload: Dict[str, Any] = Body(...),
    service: ProductService = Depends(get_product_service),
):
    try:
        updated = service.update_stock(product_id, payload.get("variantId"), payload.get("stock"))
    except ProductValidationError as exc:
        return _fail(str(exc), 400)
    if not updated:
        return _fail("Product or variant not found", 404)
    return _ok(message="Stock updated successfully")
