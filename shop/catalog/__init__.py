"""
==============================================================================
Catalog Package - Product Management
==============================================================================

In-memory product catalog with add, delete and substring search.

Classes:
--------
- Product: Immutable pydantic model for products
- Catalog: Catalog owning an ordered list of products

==============================================================================
"""

from .models import Product
from .catalog import Catalog

__all__ = [
    "Product",
    "Catalog",
]
