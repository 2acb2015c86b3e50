"""
Shared Constants for the PropFinder API

Contains the public API description, the enumerations used by listings and
the values the frontend reads from its own config module.
"""

from typing import Dict, List, Tuple

# Root info
API_NAME: str = "PropFinder API"
API_VERSION: str = "1.0.0"
API_DESCRIPTION: str = "Real Estate Properties API"

ROOT_ENDPOINTS: Dict[str, str] = {
    "health": "/health",
    "properties": "/properties",
    "swagger": "/api",
}

HEALTH_MESSAGE: str = "PropFinder API is running correctly"

# Docs
DOCS_PATH: str = "/api/docs"
DOCS_JSON_PATH: str = "/api/docs.json"
DOCS_TAGS: List[str] = ["propfinder", "properties", "health"]

# Database tables
TABLE_AGENTS: str = "agents"
TABLE_USER_PROFILES: str = "user_profiles"

# Listing enumerations
PROPERTY_TYPES: Tuple[str, ...] = ("apartment", "house", "commercial", "land")
TRANSACTION_TYPES: Tuple[str, ...] = ("sale", "rent")
PROPERTY_STATUSES: Tuple[str, ...] = ("active", "inactive", "sold", "rented")

STATUS_ACTIVE: str = "active"
STATUS_INACTIVE: str = "inactive"

DEFAULT_COUNTRY: str = "México"

# Frontend config (src/config/constants.ts in the web client)
FRONTEND_APP_CONFIG: Dict[str, str] = {
    "name": "PropFinder",
    "version": "1.0.0",
    "description": "Plataforma de Bienes Raíces",
    "apiVersion": "v1",
}

PUBLICATION_CONFIG: Dict[str, int] = {
    "freePublicationsLimit": 2,
    "freePublicationDurationDays": 60,
    "newAgentGracePeriodDays": 30,
}

UI_CONFIG: Dict[str, object] = {
    "itemsPerPage": 12,
    "maxImageUploadSize": 5 * 1024 * 1024,  # 5MB
    "supportedImageTypes": ["image/jpeg", "image/png", "image/webp"],
}

API_ENDPOINTS: Dict[str, str] = {
    "properties": "/properties",
    "health": "/health",
    "agents": "/agents",
    "visits": "/visits",
}
