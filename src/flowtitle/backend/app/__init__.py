"""Application factory for the flowtitle web UI."""

import logging
import os
from warnings import warn

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import BadRequest, NotFound

from flowtitle.backend.config.settings import I18NSettings, load_settings
from flowtitle.backend.version import get_project_version

from .http import ProblemResponse, wants_problem_response
from .localization import BundleI18NProvider
from .pagetitle import PageTitleEngine
from .routes import NAVIGATION_BLUEPRINTS, register_routes

logger = logging.getLogger(__name__)


def _parse_allowed_origins(raw: str | None) -> set[str]:
    """Convert an environment variable into a normalised set of origins."""

    if not raw:
        return set()

    return {origin.strip() for origin in raw.split(",") if origin.strip()}


def create_app(settings: I18NSettings | None = None) -> Flask:
    """Create and configure the Flask application instance."""

    app = Flask(__name__)

    settings = settings or load_settings()
    provider = BundleI18NProvider.from_settings(settings)
    engine = PageTitleEngine(provider, default_title=settings.application_title)
    engine.init_app(app, navigation_blueprints=NAVIGATION_BLUEPRINTS)

    allowed_origins = _parse_allowed_origins(os.getenv("FLOWTITLE_ALLOWED_ORIGINS"))
    if not allowed_origins:
        warn(
            "No allowed origins configured; cross-origin requests will be rejected.",
            stacklevel=1,
        )

    CORS(
        app,
        resources={r"/api/*": {"origins": sorted(allowed_origins)}},
        supports_credentials=False,
        methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    register_routes(app)
    logger.info(
        "flowtitle %s ready with locales %s",
        get_project_version(),
        ", ".join(provider.get_provided_locales()),
    )

    @app.route("/health", methods=["GET"])
    def health_check():
        """Simple health check endpoint for infrastructure monitoring."""

        payload = {
            "status": "ok",
            "version": get_project_version(),
            "locales": list(provider.get_provided_locales()),
        }
        return jsonify(payload)

    @app.errorhandler(NotFound)
    def handle_not_found(error: NotFound):
        if not wants_problem_response():
            return error
        return ProblemResponse("not_found", status=404, message=error.description).to_response()

    @app.errorhandler(BadRequest)
    def handle_bad_request(error: BadRequest):
        """Return consistent JSON responses for malformed API requests."""

        if not wants_problem_response():
            return error
        message = error.description or "Invalid request"
        return ProblemResponse("bad_request", status=400, message=message).to_response()

    return app
