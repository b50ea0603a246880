"""REST API for the furniture engine.

Exposes generation, project quoting, validation and the bundled
templates over HTTP.

Usage:
    uvicorn furniture.web:app --reload
"""

from furniture.web.app import app, create_app

__all__ = ["app", "create_app"]
