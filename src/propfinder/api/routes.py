"""
API Routes for the PropFinder API

Provides REST API endpoints for:
- Root API information
- Health and readiness checks
- Property listing and detail
- API docs and frontend config
"""

import math
from typing import Callable, Optional

from flask import Blueprint, Response, current_app, jsonify, request, send_from_directory

from propfinder.api.openapi import build_openapi, render_swagger_ui
from propfinder.config import get_config
from propfinder.core.constants import (
    API_DESCRIPTION,
    API_ENDPOINTS,
    API_NAME,
    API_VERSION,
    DOCS_JSON_PATH,
    DOCS_PATH,
    FRONTEND_APP_CONFIG,
    HEALTH_MESSAGE,
    PUBLICATION_CONFIG,
    ROOT_ENDPOINTS,
    UI_CONFIG,
)
from propfinder.core.database import get_supabase_service
from propfinder.core.models import PropertyFilters
from propfinder.core.properties import PropertiesService
from propfinder.exceptions import PropFinderError, ValidationError
from propfinder.logging_config import get_logger
from propfinder.utils.formatting import iso_timestamp

logger = get_logger(__name__)

api = Blueprint("api", __name__)

# Global service instance (lazy loaded)
_properties_service: Optional[PropertiesService] = None


def get_properties_service() -> PropertiesService:
    global _properties_service
    if _properties_service is None:
        _properties_service = PropertiesService()
    return _properties_service


def reset_properties_service() -> None:
    global _properties_service
    _properties_service = None


def _error(message: str, status_code: int):
    return jsonify({"status": "error", "error": message}), status_code


def _parse_number(name: str, cast: Callable):
    raw = request.args.get(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        value = cast(raw)
    except ValueError:
        raise ValidationError(f"Invalid value for {name}: {raw}", field=name, value=raw)
    if not math.isfinite(value):
        raise ValidationError(f"Invalid value for {name}: {raw}", field=name, value=raw)
    return value


def parse_filters() -> PropertyFilters:
    """Build PropertyFilters from the current request's query string.

    Raises:
        ValidationError: If a numeric parameter cannot be parsed.
    """
    args = request.args
    return PropertyFilters(
        property_type=args.get("property_type") or None,
        transaction_type=args.get("transaction_type") or None,
        min_price=_parse_number("min_price", float),
        max_price=_parse_number("max_price", float),
        city=args.get("city") or None,
        bedrooms=_parse_number("bedrooms", int),
        state=args.get("state") or None,
        bathrooms=_parse_number("bathrooms", int),
        min_area=_parse_number("min_area", float),
        max_area=_parse_number("max_area", float),
    )


def root_info() -> dict:
    return {
        "name": API_NAME,
        "version": API_VERSION,
        "description": API_DESCRIPTION,
        "endpoints": dict(ROOT_ENDPOINTS),
    }


# Root Endpoints
@api.route("/", methods=["GET"])
def root():
    """API root endpoint; serves the web client instead when it is built."""
    frontend_dir = current_app.config.get("FRONTEND_DIR")
    if frontend_dir:
        return send_from_directory(frontend_dir, "index.html")
    return jsonify(root_info())


@api.route("/api", methods=["GET"])
def api_info():
    return jsonify(root_info())


@api.route("/api/config", methods=["GET"])
def frontend_config():
    """Constants the web client reads at startup."""
    return jsonify({
        "app": FRONTEND_APP_CONFIG,
        "publication": PUBLICATION_CONFIG,
        "ui": UI_CONFIG,
        "endpoints": API_ENDPOINTS,
    })


@api.route(DOCS_JSON_PATH, methods=["GET"])
def openapi_document():
    return jsonify(build_openapi(get_config()))


@api.route(DOCS_PATH, methods=["GET"])
def swagger_ui():
    return Response(render_swagger_ui(get_config().app.name), mimetype="text/html")


# Health Endpoints
@api.route("/health", methods=["GET"])
def health_check():
    """Check API health status."""
    return jsonify({
        "status": "ok",
        "message": HEALTH_MESSAGE,
        "timestamp": iso_timestamp(),
        "environment": get_config().app.environment,
    })


@api.route("/health/ready", methods=["GET"])
def readiness_check():
    """Check if API is ready to receive traffic."""
    try:
        get_supabase_service().ping()
    except PropFinderError as e:
        logger.warning("Readiness check failed: %s", e)
        return jsonify({
            "status": "not_ready",
            "checks": {"database": "disconnected", "memory": "ok"},
        }), 503

    return jsonify({
        "status": "ready",
        "checks": {"database": "connected", "memory": "ok"},
    })


# Property Endpoints
@api.route("/properties", methods=["GET"])
def get_properties():
    """Get all properties with optional filters."""
    try:
        filters = parse_filters()
        properties = get_properties_service().find_by_filters(filters)
        return jsonify([p.to_dict() for p in properties])
    except ValidationError as e:
        return _error(e.message, 400)
    except Exception as e:
        logger.error("Error fetching properties: %s", e)
        return _error(str(e), 500)


@api.route("/properties/<property_id>", methods=["GET"])
def get_property(property_id: str):
    """Get a property by ID."""
    try:
        property_data = get_properties_service().find_one(property_id)
    except Exception as e:
        logger.error("Error fetching property %s: %s", property_id, e)
        return _error(str(e), 500)

    if property_data is None:
        return _error("Property not found", 404)
    return jsonify(property_data.to_dict())


def register_routes(app):
    """Register API routes with Flask app."""
    app.register_blueprint(api)
    logger.info("API routes registered")
