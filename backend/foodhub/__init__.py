"""
FoodHub Backend — Application Package Initializer
==================================================

What: Marks the `foodhub` directory as a Python package.
Who:  Imported by uvicorn (foodhub.main:app), Alembic, and pytest.

Architecture Note:
    The backend is split into layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Validation, store operations
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes extract request data and pick status codes; services own the
    rules (required fields, uniqueness, category references) and raise
    FoodHubError subclasses that the global handlers turn into JSON.
"""

__version__ = "1.0.0"
