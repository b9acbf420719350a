"""Redis implementation of ProductStore.

Each product is stored as a JSON string under ``<table>:<id>``.
It's the default implementation and satisfies the ProductStore protocol.
"""

import json
import uuid

import redis

from product_catalog.config import get_redis_client, settings
from product_catalog.entities import Product
from product_catalog.errors import (
    ConditionalCheckFailedError,
    ProductNotFoundError,
    RepositoryError,
)


class RedisProductRepository:
    """Redis implementation of the product table.

    This class satisfies the ProductStore protocol through structural
    typing - no explicit inheritance needed.

    Redis client errors are wrapped in RepositoryError so callers only deal
    with the errors in ``product_catalog.errors``.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        table_name: str | None = None,
    ) -> None:
        """Initialize the Redis product repository.

        Args:
            redis_client: Redis client instance. If None, creates default.
            table_name: Name of the product table, used as key prefix.
        """
        self._client = redis_client or get_redis_client()
        self._table_name = table_name or settings.products_table

    @classmethod
    def from_settings(cls, table_name: str | None = None) -> "RedisProductRepository":
        """Factory method to create RedisProductRepository with defaults.

        Args:
            table_name: Product table name. If None, uses settings.

        Returns:
            Configured RedisProductRepository
        """
        return cls(table_name=table_name)

    def _key(self, product_id: str) -> str:
        return f"{self._table_name}:{product_id}"

    def create(self, product: Product) -> Product:
        """Store a new product under a freshly generated id.

        Args:
            product: The product fields. Any "id" supplied is replaced.

        Returns:
            The stored product
        """
        record = {**product, "id": str(uuid.uuid4())}
        try:
            self._client.set(self._key(record["id"]), json.dumps(record))
        except redis.RedisError as e:
            raise RepositoryError(f"Failed to create product: {e}") from e
        return record

    def get_all_products(self) -> list[Product]:
        """Return every product in the table."""
        try:
            keys = list(self._client.scan_iter(match=f"{self._table_name}:*"))
            if not keys:
                return []
            values = self._client.mget(keys)
        except redis.RedisError as e:
            raise RepositoryError(f"Failed to list products: {e}") from e

        # Keys deleted between SCAN and MGET come back as None
        return [json.loads(value) for value in values if value is not None]

    def get_product_by_id(self, product_id: str) -> Product:
        """Return a single product.

        Raises:
            ProductNotFoundError: If the product does not exist
        """
        try:
            raw = self._client.get(self._key(product_id))
        except redis.RedisError as e:
            raise RepositoryError(f"Failed to fetch product {product_id}: {e}") from e

        if raw is None:
            raise ProductNotFoundError()
        return json.loads(raw)

    def update_product(self, product_id: str, product: Product) -> Product:
        """Merge fields over an existing product.

        The key is watched so the existence check and the write happen
        atomically. A concurrent write aborts the update.

        Args:
            product_id: Id of the product to update
            product: Fields to write. The stored id is never changed.

        Returns:
            The updated product

        Raises:
            ConditionalCheckFailedError: If the product does not exist
            RepositoryError: If the product changed concurrently or Redis failed
        """
        key = self._key(product_id)
        try:
            with self._client.pipeline() as pipe:
                pipe.watch(key)
                raw = pipe.get(key)
                if raw is None:
                    raise ConditionalCheckFailedError(product_id)

                record = {**json.loads(raw), **product, "id": product_id}
                pipe.multi()
                pipe.set(key, json.dumps(record))
                pipe.execute()
                return record
        except redis.WatchError as e:
            raise RepositoryError(f"Product {product_id} changed during update") from e
        except redis.RedisError as e:
            raise RepositoryError(f"Failed to update product {product_id}: {e}") from e

    def delete_product(self, product_id: str) -> Product:
        """Delete a product and return what was stored.

        Raises:
            ProductNotFoundError: If the product does not exist
        """
        key = self._key(product_id)
        try:
            with self._client.pipeline() as pipe:
                pipe.get(key)
                pipe.delete(key)
                raw, _ = pipe.execute()
        except redis.RedisError as e:
            raise RepositoryError(f"Failed to delete product {product_id}: {e}") from e

        if raw is None:
            raise ProductNotFoundError(f"Product with ID {product_id} not found")
        return json.loads(raw)

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False

    @property
    def table_name(self) -> str:
        """Get the product table name."""
        return self._table_name

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
