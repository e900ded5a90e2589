"""
==============================================================================
User Service Module
==============================================================================

User creation and lookup. Users are ancillary records: they are created
once and never updated or deleted.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from storefront.catalog.models import User
from storefront.catalog.storage import RecordStore
from storefront.catalog.validator import UserValidator
from storefront.core import exceptions
from storefront.core.exceptions import AppException


# Module logger
logger = logging.getLogger(__name__)


class UserService:
    """
    User management service.

    Example:
        >>> service = UserService(MemoryRecordStore())
        >>> user = service.create_user({"username": "john", "password": "secret"})
        >>> service.get_by_username("john") == user
        True
    """

    def __init__(self, store: RecordStore, validator: Optional[UserValidator] = None) -> None:
        self._store = store
        self._validator = validator or UserValidator()

    def create_user(self, payload: Any) -> User:
        """
        Create a new user.

        Raises:
            ValidationError: If username or password is missing
            ConflictError: USERNAME_EXISTS if the username is taken
            UnexpectedError: If the store fails
        """
        data = self._validator.validate(payload)

        try:
            user = self._store.create_user(data)
        except AppException:
            raise
        except Exception as e:
            logger.exception(f"Error creating user {data.username!r}")
            raise exceptions.internal_error("Failed to create user") from e

        logger.info(f"✅ User created: {user.username}")
        return user

    def get_by_id(self, user_id: str) -> Optional[User]:
        return self._lookup(self._store.get_user, user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        return self._lookup(self._store.get_user_by_username, username)

    @staticmethod
    def _lookup(fetch: Callable[[str], Optional[User]], key: str) -> Optional[User]:
        try:
            return fetch(key)
        except AppException:
            raise
        except Exception as e:
            logger.exception(f"Error fetching user {key!r}")
            raise exceptions.internal_error("Failed to fetch user") from e
