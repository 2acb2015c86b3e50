"""
Core modules for the PropFinder API.

Contains the Supabase wrapper, the properties service, data models and
shared constants.
"""

from propfinder.core.database import (
    SupabaseService,
    get_supabase_service,
    reset_supabase_service,
)
from propfinder.core.models import Property, PropertyFilters
from propfinder.core.properties import PropertiesService

__all__ = [
    "SupabaseService",
    "get_supabase_service",
    "reset_supabase_service",
    "Property",
    "PropertyFilters",
    "PropertiesService",
]
