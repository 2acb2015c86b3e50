"""
Flask Application Factory

Creates and configures the Flask application.
"""

from pathlib import Path

from flask import Flask, abort, send_from_directory
from flask_cors import CORS

from propfinder.config import get_config
from propfinder.api.routes import register_routes
from propfinder.core.constants import DOCS_PATH
from propfinder.logging_config import setup_logging, get_logger

logger = get_logger(__name__)

# Paths owned by the API; the SPA fallback never answers for these
API_PREFIXES = ("api", "health", "properties")


def _is_api_path(path: str) -> bool:
    return any(path == prefix or path.startswith(prefix + "/") for prefix in API_PREFIXES)


def create_app(test_config=None) -> Flask:
    """Create and configure the Flask application.

    Args:
        test_config: Optional test configuration dict.

    Returns:
        Configured Flask application.
    """
    config = get_config()

    setup_logging()

    app = Flask(__name__)
    app.config["DEBUG"] = config.api.debug
    app.json.sort_keys = False

    frontend_dir = Path(config.api.frontend_dir)
    app.config["FRONTEND_DIR"] = str(frontend_dir) if frontend_dir.is_dir() else None

    if test_config:
        app.config.update(test_config)

    CORS(
        app,
        origins=config.cors.allowed_origins,
        supports_credentials=config.cors.credentials,
        methods=config.cors.methods,
        allow_headers=config.cors.allowed_headers,
    )

    register_routes(app)

    # Serve the web client's files, falling back to index.html for SPA routing
    if app.config["FRONTEND_DIR"]:
        @app.route("/<path:path>")
        def serve_frontend(path):
            if _is_api_path(path):
                abort(404)

            static_dir = app.config["FRONTEND_DIR"]
            if (Path(static_dir) / path).is_file():
                return send_from_directory(static_dir, path)
            return send_from_directory(static_dir, "index.html")

        logger.info("Serving frontend from %s", app.config["FRONTEND_DIR"])

    logger.info("Flask app created")
    return app


def run_server(host: str = None, port: int = None, debug: bool = None):
    """Run the Flask development server.

    Args:
        host: Host to bind to.
        port: Port to bind to.
        debug: Enable debug mode.
    """
    config = get_config()

    host = host or config.api.host
    port = port or config.api.port
    debug = debug if debug is not None else config.api.debug

    app = create_app()

    logger.info("PropFinder API running on http://%s:%d", host, port)
    logger.info("API Documentation: http://%s:%d%s", host, port, DOCS_PATH)
    app.run(host=host, port=port, debug=debug)
