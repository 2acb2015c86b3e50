"""
PropFinder API

REST backend for the PropFinder real-estate platform. Listings are read
from a hosted Supabase database; a small set of sample listings is served
whenever the database cannot be reached.

Main components:
- api: Flask REST API (root info, health, properties, docs)
- core: Supabase wrapper, property service and data models
- utils: Formatting and validation helpers shared with the frontend
- cli: Command-line entry point for the API server

Usage:
    from propfinder import get_config
    from propfinder.api import create_app
    from propfinder.core import PropertiesService
"""

__version__ = "1.0.0"

from propfinder.config import get_config
from propfinder.logging_config import setup_logging

__all__ = [
    "__version__",
    "get_config",
    "setup_logging",
]
