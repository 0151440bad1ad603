"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection for the catalog owned by the running application.

The catalog lives on ``app.state.catalog``; there is no module-level
instance. Tests swap it by building a fresh application.

Usage Examples:
--------------
    @router.get("/products")
    async def list_products(catalog: Catalog = Depends(get_catalog)):
        return catalog.products

==============================================================================
"""

from __future__ import annotations

import logging

from fastapi import Request

from shop.catalog import Catalog
from shop.core import exceptions


# Module logger
logger = logging.getLogger(__name__)


def get_catalog(request: Request) -> Catalog:
    """
    Get the catalog owned by the current application.

    Raises:
        AppException: If the application was started without a catalog
    """
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        logger.error("Catalog requested before application startup")
        raise exceptions.internal_error("Product catalog not initialized")
    return catalog
