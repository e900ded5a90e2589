"""
==============================================================================
Core Package
==============================================================================

Core utilities and infrastructure for the application.

Modules:
--------
- exceptions: AppException hierarchy, handlers and factory functions
- dependencies: FastAPI dependency providers for stores and services

Usage:
------
    from storefront.core import exceptions
    raise exceptions.product_not_found(42)

==============================================================================
"""

from .exceptions import (
    AppException,
    ConflictError,
    NotFoundError,
    UnexpectedError,
    ValidationError,
    register_exception_handlers,
)

__all__ = [
    "AppException",
    "ConflictError",
    "NotFoundError",
    "UnexpectedError",
    "ValidationError",
    "register_exception_handlers",
]
