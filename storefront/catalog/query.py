"""
==============================================================================
Product Query Pipeline
==============================================================================

Deterministic transformation from "all records" to "one page".

Pipeline Order:
--------------
1. Category filter  - exact, case-sensitive; None / "" / "all" is a no-op
2. Search filter    - case-insensitive substring of name OR category
3. Sort             - created_at descending, ties keep insertion order
4. Total            - number of matches before pagination
5. Slice            - [offset, offset + limit), clipped to the bounds

The relational store expresses the same steps in SQL; the helpers
``category_filter`` and ``search_filter`` are shared so both stores agree
on when a filter is active.

==============================================================================
"""

from __future__ import annotations

import math
from typing import Iterable, List, Optional

from .models import Product, ProductQuery, QueryResult


# Category value that disables category filtering
ALL_CATEGORIES = "all"


def category_filter(category: Optional[str]) -> Optional[str]:
    """Return the category to filter on, or None when the filter is off."""
    if not category or not category.strip() or category == ALL_CATEGORIES:
        return None
    return category


def search_filter(search: Optional[str]) -> Optional[str]:
    """Return the lower-cased search needle, or None when the filter is off."""
    if not search or not search.strip():
        return None
    return search.lower()


def matches(product: Product, category: Optional[str], needle: Optional[str]) -> bool:
    """Check a product against already-normalized filters."""
    if category is not None and product.category != category:
        return False
    if needle is not None:
        return needle in product.name.lower() or needle in product.category.lower()
    return True


def run_query(products: Iterable[Product], query: ProductQuery) -> QueryResult:
    """
    Apply the full pipeline to an iterable of products in insertion order.

    Args:
        products: Every stored product, oldest insertion first
        query: Filter and pagination request

    Returns:
        QueryResult with the requested page and the total match count
    """
    category = category_filter(query.category)
    needle = search_filter(query.search)

    filtered = [p for p in products if matches(p, category, needle)]

    # sorted() is stable, so equal timestamps keep insertion order
    filtered = sorted(filtered, key=lambda p: p.created_at, reverse=True)

    total = len(filtered)
    limit = total if query.limit is None else query.limit
    offset = query.offset or 0

    return QueryResult(items=filtered[offset:offset + limit], total=total)


def page_count(total: int, limit: int) -> int:
    """
    Number of pages needed to show ``total`` records ``limit`` at a time.

    Raises:
        ValueError: If limit is not positive
    """
    if limit <= 0:
        raise ValueError("limit must be positive to compute a page count")
    return math.ceil(total / limit)


def page_to_offset(page: int, page_size: int) -> int:
    """Convert a 1-based page number to a record offset."""
    return (max(page, 1) - 1) * page_size


def sorted_categories(products: Iterable[Product]) -> List[str]:
    """Unique categories, alphabetically."""
    return sorted({p.category for p in products})
