"""Errors raised by product repositories.

Handlers inspect the error kind at each call site to choose a status code.
"""


class RepositoryError(Exception):
    """Generic storage or transport failure."""


class ProductNotFoundError(RepositoryError):
    """The requested product does not exist."""

    def __init__(self, message: str = "Product not found") -> None:
        super().__init__(message)


class ConditionalCheckFailedError(RepositoryError):
    """An update targeted a product that no longer exists."""

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Conditional check failed for product {product_id}")
        self.product_id = product_id
