"""JSON access to the resource bundles for client-side rendering."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from flowtitle.backend.app.localization import BundleI18NProvider, catalogue_payload
from flowtitle.backend.app.pagetitle.engine import EXTENSION_KEY

blueprint = Blueprint("translations", __name__, url_prefix="/api/v1/translations")


@blueprint.get("/", defaults={"locale": None})
@blueprint.get("/<locale>")
def get_translations(locale: str | None):
    """Return the bundle for ``locale`` (path or ``?locale=``) plus the fallback."""

    provider: BundleI18NProvider = current_app.extensions[EXTENSION_KEY].provider
    payload = catalogue_payload(provider, locale or request.args.get("locale"))
    return jsonify(payload), 200
