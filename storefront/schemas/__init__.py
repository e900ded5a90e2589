"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Response schemas for the REST API.

==============================================================================
"""

from .common import ErrorResponse
from .product import CategoryListResponse, ProductListResponse
from .user import UserDetail

__all__ = [
    "ErrorResponse",
    "CategoryListResponse",
    "ProductListResponse",
    "UserDetail",
]
