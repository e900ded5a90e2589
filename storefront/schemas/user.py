"""
==============================================================================
User Schemas Module
==============================================================================

Response schemas for user endpoints.

==============================================================================
"""

from pydantic import BaseModel, ConfigDict


class UserDetail(BaseModel):
    """Public user information; the credential is never returned."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
