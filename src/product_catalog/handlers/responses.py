"""Response construction and body parsing shared by the product handlers."""

import json
import logging
from typing import Any

from product_catalog.dto import ApiGatewayResponse
from product_catalog.entities import Product

logger = logging.getLogger(__name__)

HTTP_200_OK = 200
HTTP_201_CREATED = 201
HTTP_400_BAD_REQUEST = 400
HTTP_404_NOT_FOUND = 404

BAD_REQUEST = "Bad request"
PRODUCT_NOT_FOUND = "Product not found"


def create_response(status_code: int, body: Any) -> ApiGatewayResponse:
    """Build a response whose body is the JSON encoding of ``body``."""
    return ApiGatewayResponse(status_code=status_code, body=json.dumps(body))


def _reject_constant(token: str) -> None:
    raise ValueError(f"Invalid JSON token {token}")


def parse_request_body(body: str | None) -> Product | None:
    """Parse a JSON-encoded product.

    Returns:
        The decoded record, or None when the body is absent, empty,
        malformed, or not a JSON object
    """
    if not body:
        return None

    try:
        product = json.loads(body, parse_constant=_reject_constant)
    except ValueError as e:
        logger.error("Error parsing body: %s", e)
        return None

    if not isinstance(product, dict):
        logger.error("Error parsing body: expected a JSON object, got %s", type(product).__name__)
        return None
    return product
