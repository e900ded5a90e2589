"""
==============================================================================
Services Package - Business Logic Layer
==============================================================================

Service classes sitting between the API routers and the record store.

- ProductService: product listing, lookup, creation and catalog view
- UserService: user creation and lookup

==============================================================================
"""

from .product_service import ProductService
from .user_service import UserService

__all__ = [
    "ProductService",
    "UserService",
]
