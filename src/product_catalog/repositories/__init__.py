"""Repository layer for data access.

This layer hides the storage engine behind the ``ProductStore`` protocol.
Any class implementing the required methods will satisfy the protocol.
"""

from product_catalog.protocols import ProductStore

from .redis_repository import RedisProductRepository

__all__ = [
    "ProductStore",
    "RedisProductRepository",
]
