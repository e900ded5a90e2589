"""
==============================================================================
User Endpoints
==============================================================================

Creation and lookup of user records.

==============================================================================
"""

from typing import Any
from fastapi import APIRouter, Body, Depends

from storefront.core import exceptions
from storefront.core.dependencies import get_user_service
from storefront.schemas.common import ErrorResponse
from storefront.schemas.user import UserDetail
from storefront.services.user_service import UserService


router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "",
    response_model=UserDetail,
    status_code=201,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def create_user(
    payload: Any = Body(None),
    service: UserService = Depends(get_user_service)
):
    """Create a user. Usernames are unique."""
    user = service.create_user(payload)
    return UserDetail.model_validate(user)


@router.get("/{username}", response_model=UserDetail, responses={404: {"model": ErrorResponse}})
async def get_user(username: str, service: UserService = Depends(get_user_service)):
    """Get a user by username."""
    user = service.get_by_username(username)
    if user is None:
        raise exceptions.NotFoundError("User not found", "USER_NOT_FOUND", details={"username": username})
    return UserDetail.model_validate(user)
