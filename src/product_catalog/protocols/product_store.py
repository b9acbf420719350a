"""Product storage protocol.

Defines the interface for any backend that persists product records.
"""

from typing import Protocol, runtime_checkable

from product_catalog.entities import Product


@runtime_checkable
class ProductStore(Protocol):
    """Protocol for product storage backends.

    Any type that implements these methods satisfies the protocol, no
    explicit inheritance needed. Failures are reported with the exceptions
    in ``product_catalog.errors``.
    """

    def create(self, product: Product) -> Product:
        """Store a new product.

        Args:
            product: The product fields

        Returns:
            The stored product, including its assigned id

        Raises:
            RepositoryError: On storage failure
        """
        ...

    def get_all_products(self) -> list[Product]:
        """Return every stored product.

        Raises:
            RepositoryError: On storage failure
        """
        ...

    def get_product_by_id(self, product_id: str) -> Product:
        """Return a single product.

        Raises:
            ProductNotFoundError: If no product has this id
        """
        ...

    def update_product(self, product_id: str, product: Product) -> Product:
        """Update an existing product.

        Args:
            product_id: Id of the product to update
            product: Fields to write

        Returns:
            The updated product

        Raises:
            ConditionalCheckFailedError: If the product does not exist at update time
            RepositoryError: On any other storage failure
        """
        ...

    def delete_product(self, product_id: str) -> Product:
        """Delete a product.

        Returns:
            The deleted product

        Raises:
            ProductNotFoundError: If no product has this id
        """
        ...

    def health_check(self) -> bool:
        """Check if the backend is accessible."""
        ...
