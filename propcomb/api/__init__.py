"""
api
===

FastAPI router and HTTP endpoint definitions for propcomb.

Modules
-------
routes
    Router with the /prop, /calculate and /health endpoints.

Usage
-----
Import the router in main.py to register endpoints:

    from propcomb.api.routes import router
    app.include_router(router)
"""

from .routes import router

__all__ = ["router"]
