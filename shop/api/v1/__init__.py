"""
==============================================================================
API v1 Endpoints
==============================================================================

Version 1 of the REST API.

Routers:
--------
- health: Health check endpoints
- products: Product catalog

==============================================================================
"""

from . import health, products

__all__ = ["health", "products"]
