"""
FoodHub Backend — Offset Pagination Helpers
=============================================

Used by the food and category listings:

    skip        = (page - 1) * limit
    total_pages = ceil(total_count / limit)
"""

import math

from foodhub.schemas.common import Pagination

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100
# Keeps (page - 1) * limit within a 64-bit OFFSET
MAX_PAGE = 1_000_000


def offset_for(page: int, limit: int) -> int:
    """Number of records to skip to reach `page` (1-based)."""
    return (page - 1) * limit


def total_pages(total_count: int, limit: int) -> int:
    return math.ceil(total_count / limit)


def build_pagination(page: int, limit: int, total_count: int) -> Pagination:
    return Pagination(
        current_page=page,
        total_pages=total_pages(total_count, limit),
        total_count=total_count,
        per_page=limit,
    )
