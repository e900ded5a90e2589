"""
==============================================================================
Relational Record Store Module
==============================================================================

SQLAlchemy-backed record store.

The query pipeline is expressed in SQL:

    SELECT ... FROM products
    WHERE category = :category                     -- when the filter is on
      AND (lower(name) LIKE :needle OR lower(category) LIKE :needle)
    ORDER BY created_at DESC, id ASC
    LIMIT :limit OFFSET :offset

Each create runs in its own transaction: it either commits with an id
assigned by the database or rolls back leaving no row behind.

==============================================================================
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, List, Optional

from sqlalchemy import Text, func, or_, select
from sqlalchemy.exc import IntegrityError

from storefront.core import exceptions
from storefront.db.database import DatabaseManager
from storefront.db.models import ProductRecord, UserRecord

from .models import Product, ProductInput, ProductQuery, QueryResult, User, UserInput
from .query import category_filter, search_filter
from .storage import RecordStore, utc_now


# Module logger
logger = logging.getLogger(__name__)

# Signed 64-bit range of an INTEGER primary key
MIN_SQL_INTEGER = -(2 ** 63)
MAX_SQL_INTEGER = 2 ** 63 - 1


class SqlRecordStore(RecordStore):
    """
    Record store persisted through SQLAlchemy.

    Attributes:
        _db: DatabaseManager providing sessions

    Example:
        >>> store = SqlRecordStore(DatabaseManager("sqlite://"))
        >>> store.create_product(validated_input).id
        1
    """

    def __init__(
        self,
        db_manager: DatabaseManager,
        clock: Optional[Callable[[], datetime]] = None
    ) -> None:
        self._db = db_manager
        self._clock = clock or utc_now
        self._db.create_tables()

    # =========================================================================
    # PRODUCTS
    # =========================================================================

    def create_product(self, data: ProductInput) -> Product:
        record = ProductRecord(
            name=data.name,
            price=data.price,
            category=data.category,
            stock_status=data.stock_status.value,
            # stored naive; SQLite DateTime drops tzinfo anyway
            created_at=self._clock().replace(tzinfo=None),
        )

        with self._db.session_scope() as session:
            session.add(record)
            session.flush()
            session.refresh(record)
            product = Product.model_validate(record)

        logger.debug(f"Stored product {product.id}: {product.name}")
        return product

    def get_product_by_id(self, product_id: int) -> Optional[Product]:
        if not MIN_SQL_INTEGER <= product_id <= MAX_SQL_INTEGER:
            # no row can carry an id outside the INTEGER column range
            return None

        with self._db.session_scope() as session:
            record = session.get(ProductRecord, product_id)
            return Product.model_validate(record) if record else None

    def get_products(self, query: ProductQuery) -> QueryResult:
        statement = select(ProductRecord)

        category = category_filter(query.category)
        if category is not None:
            statement = statement.where(ProductRecord.category == category)

        needle = search_filter(query.search)
        if needle is not None:
            statement = statement.where(
                or_(
                    func.lower(ProductRecord.name, type_=Text).contains(needle, autoescape=True),
                    func.lower(ProductRecord.category, type_=Text).contains(needle, autoescape=True),
                )
            )

        count_statement = select(func.count()).select_from(statement.subquery())

        page_statement = statement.order_by(
            ProductRecord.created_at.desc(),
            ProductRecord.id.asc(),
        )

        with self._db.session_scope() as session:
            total = session.execute(count_statement).scalar_one()

            # Bounds past the last match never reach SQL, where they could
            # overflow INTEGER; the page is simply empty
            offset = query.offset or 0
            if offset >= total:
                return QueryResult(items=[], total=total)

            if offset:
                page_statement = page_statement.offset(offset)
            if query.limit is not None:
                page_statement = page_statement.limit(min(query.limit, total))

            records = session.execute(page_statement).scalars().all()
            items = [Product.model_validate(r) for r in records]

        return QueryResult(items=items, total=total)

    def list_categories(self) -> List[str]:
        statement = select(ProductRecord.category).distinct().order_by(ProductRecord.category)
        with self._db.session_scope() as session:
            return list(session.execute(statement).scalars().all())

    def count_products(self) -> int:
        with self._db.session_scope() as session:
            return session.execute(select(func.count(ProductRecord.id))).scalar_one()

    # =========================================================================
    # USERS
    # =========================================================================

    def create_user(self, data: UserInput) -> User:
        if self.get_user_by_username(data.username) is not None:
            raise exceptions.username_exists(data.username)

        record = UserRecord(username=data.username, password=data.password)
        try:
            with self._db.session_scope() as session:
                session.add(record)
                session.flush()
                user = User.model_validate(record)
        except IntegrityError:
            # Lost a race with a concurrent insert of the same username
            raise exceptions.username_exists(data.username)

        logger.debug(f"Stored user {user.id}: {user.username}")
        return user

    def get_user(self, user_id: str) -> Optional[User]:
        with self._db.session_scope() as session:
            record = session.get(UserRecord, user_id)
            return User.model_validate(record) if record else None

    def get_user_by_username(self, username: str) -> Optional[User]:
        statement = select(UserRecord).where(UserRecord.username == username)
        with self._db.session_scope() as session:
            record = session.execute(statement).scalar_one_or_none()
            return User.model_validate(record) if record else None

    def close(self) -> None:
        self._db.dispose()

    def __repr__(self) -> str:
        return f"SqlRecordStore({self._db!r})"
