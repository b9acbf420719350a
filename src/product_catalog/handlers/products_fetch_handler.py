"""Read handler for the product catalog: list and fetch by id."""

import logging

from product_catalog.dto import ApiGatewayRequest, ApiGatewayResponse
from product_catalog.entities import InvocationContext
from product_catalog.protocols import ProductStore

from .responses import (
    BAD_REQUEST,
    HTTP_200_OK,
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    PRODUCT_NOT_FOUND,
    create_response,
)

logger = logging.getLogger(__name__)


class ProductsFetchHandler:
    """Handles GET /products and GET /products/{id}.

    Error bodies are ``{"message": ...}`` objects. A failed listing is
    reported as 400, a failed single fetch as 404.
    """

    def __init__(self, repository: ProductStore) -> None:
        """Initialize the fetch handler.

        Args:
            repository: The product store (required).
        """
        self._repository = repository

    def handle(self, request: ApiGatewayRequest, context: InvocationContext) -> ApiGatewayResponse:
        """Dispatch a read request.

        Args:
            request: The gateway request descriptor
            context: Trace identifiers for this invocation

        Returns:
            The gateway response
        """
        logger.info(
            "API Gateway RequestId: %s - Lambda RequestId: %s",
            request.request_context.request_id,
            context.request_id,
        )

        try:
            if request.resource == "/products":
                if request.http_method == "GET":
                    return self._get_all_products()
            elif request.resource == "/products/{id}":
                if request.http_method == "GET":
                    return self._get_product_by_id(request)

            return create_response(HTTP_400_BAD_REQUEST, {"message": BAD_REQUEST})
        except Exception:
            logger.exception("Unhandled error")
            return create_response(HTTP_400_BAD_REQUEST, {"message": BAD_REQUEST})

    def _get_all_products(self) -> ApiGatewayResponse:
        logger.info("GET /products")

        try:
            products = self._repository.get_all_products()
        except Exception as e:
            logger.error("Error fetching products: %s", e)
            return create_response(HTTP_400_BAD_REQUEST, {"message": BAD_REQUEST})
        return create_response(HTTP_200_OK, products)

    def _get_product_by_id(self, request: ApiGatewayRequest) -> ApiGatewayResponse:
        product_id = request.product_id
        if not product_id:
            logger.error("Product ID is missing")
            return create_response(HTTP_400_BAD_REQUEST, {"message": BAD_REQUEST})

        logger.info("GET /products/%s", product_id)

        try:
            product = self._repository.get_product_by_id(product_id)
        except Exception as e:
            logger.error("Error fetching product: %s", e)
            return create_response(HTTP_404_NOT_FOUND, {"message": PRODUCT_NOT_FOUND})
        return create_response(HTTP_200_OK, product)
