"""Product Catalog - read and write handlers for a product table.

Layers:
    - protocols: Interface contracts (ProductStore)
    - repositories: Data access implementations
    - handlers: Route/method dispatch and status mapping
    - dto: Gateway request/response contracts
    - entities: Domain models (internal)

Usage:
    ```python
    from product_catalog.functions import products_admin, products_fetch

    result = products_fetch({"resource": "/products", "httpMethod": "GET"}, None)
    ```

For the local HTTP gateway:
    ```python
    from product_catalog.api.app import app
    ```
"""

from product_catalog.config import get_redis_client, settings
from product_catalog.dto import ApiGatewayRequest, ApiGatewayResponse
from product_catalog.entities import InvocationContext, Product
from product_catalog.errors import (
    ConditionalCheckFailedError,
    ProductNotFoundError,
    RepositoryError,
)
from product_catalog.handlers import ProductsAdminHandler, ProductsFetchHandler
from product_catalog.protocols import ProductStore
from product_catalog.repositories import RedisProductRepository

__all__ = [
    # Configuration
    "settings",
    "get_redis_client",
    # Protocols (interfaces)
    "ProductStore",
    # Handlers
    "ProductsAdminHandler",
    "ProductsFetchHandler",
    # Repositories (data access)
    "RedisProductRepository",
    # Errors
    "RepositoryError",
    "ProductNotFoundError",
    "ConditionalCheckFailedError",
    # Entities (domain models)
    "InvocationContext",
    "Product",
    # DTOs (gateway contracts)
    "ApiGatewayRequest",
    "ApiGatewayResponse",
]
