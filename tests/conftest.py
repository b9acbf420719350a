"""Shared fixtures for the product catalog tests."""

import json
import uuid

import pytest

from product_catalog.dto import ApiGatewayRequest
from product_catalog.entities import InvocationContext, Product
from product_catalog.errors import ConditionalCheckFailedError, ProductNotFoundError


class InMemoryProductStore:
    """ProductStore backed by a dict, raising the same errors as Redis."""

    def __init__(self, healthy: bool = True) -> None:
        self.products: dict[str, Product] = {}
        self.healthy = healthy

    def create(self, product: Product) -> Product:
        record = {**product, "id": str(uuid.uuid4())}
        self.products[record["id"]] = record
        return record

    def get_all_products(self) -> list[Product]:
        return list(self.products.values())

    def get_product_by_id(self, product_id: str) -> Product:
        if product_id not in self.products:
            raise ProductNotFoundError()
        return self.products[product_id]

    def update_product(self, product_id: str, product: Product) -> Product:
        if product_id not in self.products:
            raise ConditionalCheckFailedError(product_id)
        record = {**self.products[product_id], **product, "id": product_id}
        self.products[product_id] = record
        return record

    def delete_product(self, product_id: str) -> Product:
        if product_id not in self.products:
            raise ProductNotFoundError(f"Product with ID {product_id} not found")
        return self.products.pop(product_id)

    def health_check(self) -> bool:
        return self.healthy


def make_event(
    resource: str,
    method: str,
    product_id: str | None = None,
    body: object = None,
) -> dict:
    """Build a proxy event dict. Non-string bodies are JSON-encoded."""
    if body is not None and not isinstance(body, str):
        body = json.dumps(body)
    return {
        "resource": resource,
        "path": resource.replace("{id}", product_id or ""),
        "httpMethod": method,
        "headers": {"Content-Type": "application/json"},
        "pathParameters": {"id": product_id} if product_id is not None else None,
        "body": body,
        "isBase64Encoded": False,
        "requestContext": {"requestId": "api-request-1", "stage": "prod"},
    }


def make_request(*args, **kwargs) -> ApiGatewayRequest:
    """Build a validated gateway request, see ``make_event``."""
    return ApiGatewayRequest.model_validate(make_event(*args, **kwargs))


@pytest.fixture
def store():
    """Create an empty in-memory product store."""
    return InMemoryProductStore()


@pytest.fixture
def widget(store):
    """Store a single product and return it."""
    return store.create({"name": "Widget", "price": 10, "model": "W-1"})


@pytest.fixture
def context():
    """Invocation context with a fixed request id."""
    return InvocationContext(request_id="lambda-request-1")
