"""Test configuration utilities and shared fixtures."""

import sys
from pathlib import Path

# Ensure the ``src`` directory is importable when tests are executed without an
# editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402
from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402

from flowtitle.backend.app import create_app  # noqa: E402
from flowtitle.backend.app.localization import BundleI18NProvider  # noqa: E402
from flowtitle.backend.config import settings as settings_module  # noqa: E402

EN_TABLE = {"greeting": "Hello", "app.name": "Demo", "farewell": "Bye {0}"}
DE_TABLE = {"greeting": "Hallo", "app.name": "Demo", "farewell": "Tschüss {0}"}


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    settings_module.load_settings.cache_clear()
    yield
    settings_module.load_settings.cache_clear()


@pytest.fixture()
def provider() -> BundleI18NProvider:
    """Return a provider backed by small in-memory English and German tables."""

    return BundleI18NProvider(("en", "de"), {"en": EN_TABLE, "de": DE_TABLE})


@pytest.fixture()
def app() -> Flask:
    """Return a configured Flask application for integration tests."""

    application = create_app()
    application.config.update(TESTING=True)
    return application


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Provide a test client bound to the configured Flask app."""

    return app.test_client()
