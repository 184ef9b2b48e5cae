"""
FoodHub Backend — API Routes Package
======================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - users.py:     POST /api/users, POST /api/login       (public)
                    GET/PUT/DELETE /api/users[/{id}]       (bearer)
    - food.py:      /api/food, /api/food/{id}              (bearer)
    - category.py:  /api/category                          (bearer)
    - items.py:     /api/item[s], /api/items/category/{id} (public)
    - upload.py:    POST /api/upload                       (public)
    - health.py:    GET  /health                           (public)

Routes are thin: they read the request, call a service, and shape the
response. Business rules live in foodhub.services.
"""
