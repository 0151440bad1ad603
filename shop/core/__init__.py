"""
==============================================================================
Core Package
==============================================================================

Core infrastructure for the HTTP layer.

Modules:
--------
- exceptions: AppException class and error factory functions
- dependencies: FastAPI dependency injection functions

Usage:
------
    from shop.core import exceptions
    raise exceptions.product_not_found("42")

==============================================================================
"""

from .exceptions import (
    AppException,
    register_exception_handlers,
)
from .dependencies import get_catalog

__all__ = [
    # Exceptions
    "AppException",
    "register_exception_handlers",
    # Dependencies
    "get_catalog",
]
