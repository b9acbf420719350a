"""Domain entities for internal representation.

Products travel through the system as plain flat records; only the
invocation context is modelled as a frozen dataclass.
"""

from .invocation import InvocationContext
from .product import Product

__all__ = ["InvocationContext", "Product"]
