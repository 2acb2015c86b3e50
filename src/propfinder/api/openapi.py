"""
OpenAPI document and Swagger UI page for the PropFinder API.
"""

from typing import Any, Dict

from propfinder.config import Config
from propfinder.core.constants import (
    DOCS_JSON_PATH,
    DOCS_TAGS,
    PROPERTY_STATUSES,
    PROPERTY_TYPES,
    TRANSACTION_TYPES,
)

SWAGGER_UI_VERSION = "5"

SWAGGER_UI_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{title}</title>
  <link rel="stylesheet" href="https://unpkg.com/swagger-ui-dist@{version}/swagger-ui.css">
</head>
<body>
  <div id="swagger-ui"></div>
  <script src="https://unpkg.com/swagger-ui-dist@{version}/swagger-ui-bundle.js"></script>
  <script>
    window.ui = SwaggerUIBundle({{url: "{spec_url}", dom_id: "#swagger-ui"}});
  </script>
</body>
</html>
"""

_PROPERTY_SCHEMA = {
    "type": "object",
    "properties": {
        "id": {"type": "string"},
        "title": {"type": "string"},
        "description": {"type": "string"},
        "price": {"type": "number"},
        "property_type": {"type": "string", "enum": list(PROPERTY_TYPES)},
        "transaction_type": {"type": "string", "enum": list(TRANSACTION_TYPES)},
        "location": {
            "type": "object",
            "properties": {
                "address": {"type": "string"},
                "city": {"type": "string"},
                "state": {"type": "string"},
                "country": {"type": "string"},
                "coordinates": {
                    "type": "object",
                    "properties": {
                        "lat": {"type": "number"},
                        "lng": {"type": "number"},
                    },
                },
            },
        },
        "features": {
            "type": "object",
            "properties": {
                "bedrooms": {"type": "number"},
                "bathrooms": {"type": "number"},
                "area": {"type": "number"},
                "parking_spaces": {"type": "number"},
            },
        },
        "images": {"type": "array", "items": {"type": "string"}},
        "status": {"type": "string", "enum": list(PROPERTY_STATUSES)},
        "created_at": {"type": "string"},
        "updated_at": {"type": "string"},
    },
}

_ERROR_SCHEMA = {
    "type": "object",
    "properties": {
        "status": {"type": "string", "example": "error"},
        "error": {"type": "string"},
    },
}


def _query(name: str, schema: Dict[str, Any]) -> Dict[str, Any]:
    return {"name": name, "in": "query", "required": False, "schema": schema}


def _json(description: str, schema: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "description": description,
        "content": {"application/json": {"schema": schema}},
    }


def build_openapi(config: Config) -> Dict[str, Any]:
    """Build the OpenAPI 3 document describing every public endpoint."""
    return {
        "openapi": "3.0.3",
        "info": {
            "title": config.app.name,
            "description": config.app.description,
            "version": config.app.version,
        },
        "servers": [
            {"url": config.api.backend_url, "description": "Production"},
            {"url": "http://localhost:3000", "description": "Development"},
        ],
        "tags": [{"name": tag} for tag in DOCS_TAGS],
        "paths": {
            "/": {
                "get": {
                    "tags": ["propfinder"],
                    "summary": "API root endpoint",
                    "responses": {"200": _json("API information", {"type": "object"})},
                },
            },
            "/health": {
                "get": {
                    "tags": ["health"],
                    "summary": "Check API health status",
                    "responses": {"200": _json("API is healthy", {
                        "type": "object",
                        "properties": {
                            "status": {"type": "string", "example": "ok"},
                            "message": {"type": "string"},
                            "timestamp": {"type": "string", "example": "2024-01-20T10:00:00.000Z"},
                            "environment": {"type": "string", "example": "production"},
                        },
                    })},
                },
            },
            "/health/ready": {
                "get": {
                    "tags": ["health"],
                    "summary": "Check if API is ready to receive traffic",
                    "responses": {
                        "200": _json("API is ready", {"type": "object"}),
                        "503": _json("Database is unreachable", {"type": "object"}),
                    },
                },
            },
            "/properties": {
                "get": {
                    "tags": ["properties"],
                    "summary": "Get all properties with optional filters",
                    "parameters": [
                        _query("property_type", {"type": "string", "enum": list(PROPERTY_TYPES)}),
                        _query("transaction_type", {"type": "string", "enum": list(TRANSACTION_TYPES)}),
                        _query("min_price", {"type": "number"}),
                        _query("max_price", {"type": "number"}),
                        _query("city", {"type": "string"}),
                        _query("bedrooms", {"type": "integer"}),
                        _query("state", {"type": "string"}),
                        _query("bathrooms", {"type": "integer"}),
                        _query("min_area", {"type": "number"}),
                        _query("max_area", {"type": "number"}),
                    ],
                    "responses": {
                        "200": _json("List of properties", {
                            "type": "array", "items": _PROPERTY_SCHEMA,
                        }),
                        "400": _json("Invalid filter value", _ERROR_SCHEMA),
                    },
                },
            },
            "/properties/{id}": {
                "get": {
                    "tags": ["properties"],
                    "summary": "Get a property by ID",
                    "parameters": [{
                        "name": "id",
                        "in": "path",
                        "required": True,
                        "description": "Property ID",
                        "schema": {"type": "string"},
                    }],
                    "responses": {
                        "200": _json("Property found", _PROPERTY_SCHEMA),
                        "404": _json("Property not found", _ERROR_SCHEMA),
                    },
                },
            },
        },
    }


def render_swagger_ui(title: str) -> str:
    return SWAGGER_UI_PAGE.format(
        title=title,
        version=SWAGGER_UI_VERSION,
        spec_url=DOCS_JSON_PATH,
    )
