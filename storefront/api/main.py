"""
FastAPI application - backend CRUD API for the storefront catalog
"""

from dotenv import load_dotenv

load_dotenv()

import logging
import os
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.api.endpoints.products import products_api
from storefront.error_handler import ErrorHandler
from storefront.services.product_service import ProductService

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

error_handler = ErrorHandler()


def create_app(product_service: Optional[ProductService] = None) -> FastAPI:
    app = FastAPI(
        title="FanKick Storefront API",
        description="Product catalog CRUD API backing the storefront catalog cache",
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if product_service is None:
        db_path = os.getenv("PRODUCTS_DB_PATH")
        product_service = ProductService(db_path=Path(db_path) if db_path else None)
        logger.info("Product service ready (%s)", db_path or "in-memory")
    app.state.product_service = product_service

    app.include_router(products_api, prefix="/api/products", tags=["Products"])

    @app.exception_handler(Exception)
    async def unhandled_exception(request: Request, exc: Exception):
        payload = error_handler.handle_exception(exc, context={"path": request.url.path, "method": request.method})
        return JSONResponse(status_code=500, content=payload)

    @app.get("/health")
    def health():
        return {"status": "ok", "products": len(app.state.product_service.list_products())}

    return app


app = create_app()
