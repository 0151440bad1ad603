"""
==============================================================================
API Router
==============================================================================

Mounts the v1 endpoint modules under /api/v1.

==============================================================================
"""

from fastapi import APIRouter

from shop.api.v1 import health, products


API_PREFIX = "/api/v1"

api_router = APIRouter(prefix=API_PREFIX)

for module in (health, products):
    api_router.include_router(module.router)
