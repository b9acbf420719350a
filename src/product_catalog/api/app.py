"""Local HTTP gateway for the product handlers.

Translates plain HTTP requests into gateway request descriptors, sends GET
requests to the fetch handler and everything else to the admin handler, and
returns the handler's status code and body unchanged.
"""

import uuid
from typing import Any

from fastapi import FastAPI, HTTPException, Request, Response, status
from fastapi.concurrency import run_in_threadpool

from product_catalog.api.dependencies import (
    AdminHandlerDep,
    FetchHandlerDep,
    RepositoryDep,
    build_lifespan,
)
from product_catalog.config import configure_logging, settings
from product_catalog.dto import ApiGatewayRequest, RequestContext
from product_catalog.entities import InvocationContext
from product_catalog.handlers import ProductsAdminHandler, ProductsFetchHandler
from product_catalog.protocols import ProductStore

# Every method reaches the handlers so unsupported ones get their 400
METHODS = ["GET", "HEAD", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"]


async def _dispatch(
    request: Request,
    resource: str,
    admin: ProductsAdminHandler,
    fetch: ProductsFetchHandler,
) -> Response:
    """Forward an HTTP request to the matching product handler."""
    raw_body = await request.body()
    gateway_request = ApiGatewayRequest(
        resource=resource,
        http_method=request.method,
        path_parameters=dict(request.path_params) or None,
        body=raw_body.decode("utf-8", errors="replace") or None,
        request_context=RequestContext(request_id=str(uuid.uuid4())),
    )
    context = InvocationContext(request_id=str(uuid.uuid4()))

    handler = fetch if request.method == "GET" else admin
    result = await run_in_threadpool(handler.handle, gateway_request, context)

    return Response(
        content=result.body,
        status_code=result.status_code,
        media_type="application/json",
    )


def create_app(repository: ProductStore | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        repository: Product store to serve. If None, uses Redis from settings.
    """
    configure_logging()

    app = FastAPI(
        title="Product Catalog API",
        description="Local gateway for the product catalog handlers",
        version="0.1.0",
        lifespan=build_lifespan(repository),
    )

    @app.get("/")
    async def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": "Product Catalog API",
            "version": "0.1.0",
            "endpoints": {
                "products": "/products",
                "product": "/products/{id}",
                "health": "/health",
            },
        }

    @app.get("/health")
    async def health(repository: RepositoryDep) -> dict[str, Any]:
        """Health check endpoint."""
        if not await run_in_threadpool(repository.health_check):
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Product storage unreachable",
            )
        return {"status": "healthy"}

    @app.api_route("/products", methods=METHODS)
    async def products(request: Request, admin: AdminHandlerDep, fetch: FetchHandlerDep) -> Response:
        return await _dispatch(request, "/products", admin, fetch)

    @app.api_route("/products/{id}", methods=METHODS)
    async def product_with_id(request: Request, admin: AdminHandlerDep, fetch: FetchHandlerDep) -> Response:
        return await _dispatch(request, "/products/{id}", admin, fetch)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "product_catalog.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
