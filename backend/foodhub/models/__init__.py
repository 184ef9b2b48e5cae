"""
FoodHub Backend — ORM Models Package
======================================

Importing this package registers every table with Base.metadata, which
Alembic autogenerate and the test suite's create_all rely on.
"""

from foodhub.models.category import Category
from foodhub.models.food import Food, FOOD_CATEGORIES
from foodhub.models.item import Item
from foodhub.models.user import User

__all__ = ["Category", "Food", "FOOD_CATEGORIES", "Item", "User"]
