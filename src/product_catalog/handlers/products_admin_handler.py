"""Write handler for the product catalog: create, update and delete."""

import logging

from product_catalog.dto import ApiGatewayRequest, ApiGatewayResponse
from product_catalog.entities import InvocationContext
from product_catalog.errors import ConditionalCheckFailedError
from product_catalog.protocols import ProductStore

from .responses import (
    BAD_REQUEST,
    HTTP_200_OK,
    HTTP_201_CREATED,
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    PRODUCT_NOT_FOUND,
    create_response,
    parse_request_body,
)

logger = logging.getLogger(__name__)


class ProductsAdminHandler:
    """Handles POST /products, PUT /products/{id} and DELETE /products/{id}.

    Error bodies are bare JSON strings. Any error not mapped at a call site
    ends up as 400.

    Example:
        ```python
        from product_catalog.handlers import ProductsAdminHandler
        from product_catalog.repositories import RedisProductRepository

        handler = ProductsAdminHandler(repository=RedisProductRepository.from_settings())
        response = handler.handle(request, context)
        ```
    """

    def __init__(self, repository: ProductStore) -> None:
        """Initialize the admin handler.

        Args:
            repository: The product store (required).
        """
        self._repository = repository

    def handle(self, request: ApiGatewayRequest, context: InvocationContext) -> ApiGatewayResponse:
        """Dispatch a write request.

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
                if request.http_method == "POST":
                    return self._create_product(request)
            elif request.resource == "/products/{id}":
                return self._product_with_id(request)

            return create_response(HTTP_400_BAD_REQUEST, BAD_REQUEST)
        except Exception:
            logger.exception("Unhandled error")
            return create_response(HTTP_400_BAD_REQUEST, BAD_REQUEST)

    def _create_product(self, request: ApiGatewayRequest) -> ApiGatewayResponse:
        logger.info("POST /products")

        product = parse_request_body(request.body)
        if product is None:
            return create_response(HTTP_400_BAD_REQUEST, BAD_REQUEST)

        created = self._repository.create(product)
        return create_response(HTTP_201_CREATED, created)

    def _product_with_id(self, request: ApiGatewayRequest) -> ApiGatewayResponse:
        product_id = request.product_id
        if not product_id:
            return create_response(HTTP_400_BAD_REQUEST, BAD_REQUEST)

        if request.http_method == "PUT":
            return self._update_product(request, product_id)
        if request.http_method == "DELETE":
            return self._delete_product(product_id)

        return create_response(HTTP_400_BAD_REQUEST, BAD_REQUEST)

    def _update_product(self, request: ApiGatewayRequest, product_id: str) -> ApiGatewayResponse:
        logger.info("PUT /products/%s", product_id)

        product = parse_request_body(request.body)
        if product is None:
            return create_response(HTTP_400_BAD_REQUEST, BAD_REQUEST)

        try:
            updated = self._repository.update_product(product_id, product)
        except ConditionalCheckFailedError:
            return create_response(HTTP_404_NOT_FOUND, PRODUCT_NOT_FOUND)
        return create_response(HTTP_200_OK, updated)

    def _delete_product(self, product_id: str) -> ApiGatewayResponse:
        logger.info("DELETE /products/%s", product_id)

        try:
            deleted = self._repository.delete_product(product_id)
        except Exception as e:
            logger.error("Delete error: %s", e)
            # The underlying message is returned to the caller as-is
            return create_response(HTTP_404_NOT_FOUND, str(e))
        return create_response(HTTP_200_OK, deleted)
