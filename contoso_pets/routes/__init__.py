# Routes package init
"""
ContosoPets API — Routes Package
=================================

Route Inventory:
    - products.py:  GET/POST /products, GET/PUT/DELETE /products/{id}
    - health.py:    GET /health

Routes stay thin: they read the request, call ProductService, and set the
status code and headers. The request-to-outcome decisions live in the service.
"""
