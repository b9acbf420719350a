"""Protocol interfaces for swappable implementations.

Handlers depend on ``ProductStore``, not on a concrete backend, so tests can
substitute an in-memory implementation.
"""

from .product_store import ProductStore

__all__ = [
    "ProductStore",
]
