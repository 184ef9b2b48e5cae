"""
FoodHub Backend — Pydantic Schemas Package
===========================================

Request/response contracts. Python attributes are snake_case; the JSON wire
format is camelCase (firstName, isAvailable, categoryId, ...) through the
shared CamelModel alias generator.
"""
