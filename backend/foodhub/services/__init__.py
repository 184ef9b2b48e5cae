"""
FoodHub Backend — Services Package
===================================

Stateless business-logic singletons. Each method receives the request's
AsyncSession, so services hold no per-request state.

    - user_service.py:       credential store (register, update, delete)
    - auth_service.py:       login and token issuance
    - food_service.py:       food catalog with filtered pagination
    - inventory_service.py:  categories and items
    - file_service.py:       image upload validation and storage
"""
