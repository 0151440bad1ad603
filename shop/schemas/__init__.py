"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Request and response schemas using Pydantic for validation.

This package provides:
- Common: Shared response schemas
- Product: Catalog request/response schemas

==============================================================================
"""

from .common import SuccessResponse, MessageResponse
from .product import (
    ProductCreate,
    ProductResponse,
    ProductDetail,
    ProductListResponse,
    NameSearchResponse,
    ProducerSearchResponse,
)

__all__ = [
    # Common
    "SuccessResponse",
    "MessageResponse",
    # Product
    "ProductCreate",
    "ProductResponse",
    "ProductDetail",
    "ProductListResponse",
    "NameSearchResponse",
    "ProducerSearchResponse",
]
