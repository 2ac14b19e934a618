# Middleware package init
"""
ContosoPets API — Middleware Package
=====================================

Middleware Chain (request direction):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID first, so every later log line can carry the id
    2. Logging wraps the handler and records status and duration
    3. GZip and CORS are FastAPI's stock middleware

Responses travel back through the chain in reverse order, which is where the
X-Request-ID header is added and the access line is written.
"""
