"""
ContosoPets API — Application Package Initializer
=================================================

What:  Marks the `contoso_pets` directory as a Python package.
Who:   Imported by uvicorn (`contoso_pets.main:app`), pytest, and every module
       that needs `from contoso_pets.config import settings`.

Architecture Note:
    The service is split into thin layers:

    ┌─────────────────────────────────────┐
    │        Routes (HTTP boundary)       │  ← status codes, headers
    ├─────────────────────────────────────┤
    │     ProductService (controller)     │  ← request → store mapping
    ├─────────────────────────────────────┤
    │     ProductStore (persistence)      │  ← find / add / remove / save
    ├─────────────────────────────────────┤
    │   Models & Schemas · Database       │  ← SQLAlchemy ORM + Pydantic
    └─────────────────────────────────────┘

    The store is handed to the service per request by FastAPI's dependency
    injection; nothing below the routes holds global database state.
"""

__version__ = "1.0.0"
