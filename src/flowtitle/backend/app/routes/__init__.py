"""Blueprint registrations for application routes."""

from flask import Flask

from .localization import blueprint as translations_blueprint
from .views import blueprint as views_blueprint

NAVIGATION_BLUEPRINTS = (views_blueprint.name,)


def register_routes(app: Flask) -> None:
    """Register all Flask blueprints with the provided application."""

    app.register_blueprint(views_blueprint)
    app.register_blueprint(translations_blueprint)
