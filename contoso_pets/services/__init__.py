# Services package init
"""
ContosoPets API — Services Layer
=================================

What:  Request-to-persistence logic between routes (HTTP) and stores.

Service Inventory:
    - ProductService: list / get / create / update / delete products

Services take their store as a constructor argument; they hold no module
level state and can be exercised without HTTP.
"""
