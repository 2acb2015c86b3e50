"""
Flask REST API for the PropFinder platform.

Provides endpoints for:
- API information and docs
- Health and readiness checks
- Property listing and detail
"""

from propfinder.api.server import create_app
from propfinder.api.routes import register_routes

__all__ = [
    "create_app",
    "register_routes",
]
