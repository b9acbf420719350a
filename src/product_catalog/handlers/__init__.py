"""Handler layer for gateway requests.

Each handler dispatches on route template, then on HTTP method, calls the
repository and maps its outcome to a status code.

Architecture:
    Handler -> Repository
    (HTTP)  -> (Data Access)
"""

from .products_admin_handler import ProductsAdminHandler
from .products_fetch_handler import ProductsFetchHandler

__all__ = [
    "ProductsAdminHandler",
    "ProductsFetchHandler",
]
