"""
==============================================================================
API v1 Endpoints
==============================================================================

Routers:
--------
- health: Health check endpoints
- products: Product listing, lookup and creation
- catalog: Page-number catalog view
- users: User creation and lookup

==============================================================================
"""

from . import health, products, catalog, users

__all__ = ["health", "products", "catalog", "users"]
