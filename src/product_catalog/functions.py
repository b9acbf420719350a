"""Process entry points for the product handlers.

``products_admin`` and ``products_fetch`` take a raw proxy event dict and a
Lambda-style context object and return a ``{"statusCode", "body"}`` dict.
The repository is created once per process and shared by every invocation.
"""

import logging
from typing import Any

from pydantic import ValidationError

from product_catalog.config import configure_logging
from product_catalog.dto import ApiGatewayRequest
from product_catalog.entities import InvocationContext
from product_catalog.handlers import ProductsAdminHandler, ProductsFetchHandler
from product_catalog.handlers.responses import BAD_REQUEST, HTTP_400_BAD_REQUEST, create_response
from product_catalog.protocols import ProductStore
from product_catalog.repositories import RedisProductRepository

configure_logging()
logger = logging.getLogger(__name__)

# Global instance
_repository: ProductStore | None = None


def get_product_repository() -> ProductStore:
    """Get or create the process-wide product repository."""
    global _repository
    if _repository is None:
        _repository = RedisProductRepository.from_settings()
    return _repository


def set_product_repository(repository: ProductStore | None) -> None:
    """Replace the process-wide repository. None restores lazy creation."""
    global _repository
    _repository = repository


def _parse_event(event: dict[str, Any]) -> ApiGatewayRequest | None:
    try:
        return ApiGatewayRequest.model_validate(event)
    except ValidationError as e:
        logger.error("Invalid event: %s", e)
        return None


def products_admin(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Entry point for create, update and delete requests."""
    request = _parse_event(event)
    if request is None:
        return create_response(HTTP_400_BAD_REQUEST, BAD_REQUEST).to_event()

    handler = ProductsAdminHandler(repository=get_product_repository())
    return handler.handle(request, InvocationContext.from_lambda_context(context)).to_event()


def products_fetch(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Entry point for list and fetch-by-id requests."""
    request = _parse_event(event)
    if request is None:
        return create_response(HTTP_400_BAD_REQUEST, {"message": BAD_REQUEST}).to_event()

    handler = ProductsFetchHandler(repository=get_product_repository())
    return handler.handle(request, InvocationContext.from_lambda_context(context)).to_event()
