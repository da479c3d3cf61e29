"""HTML views whose page titles are resolved from their title metadata."""

from __future__ import annotations

from flask import Blueprint, current_app, render_template

from flowtitle.backend.app.localization import I18NProvider
from flowtitle.backend.app.pagetitle import current_page, page_title
from flowtitle.backend.app.pagetitle.engine import EXTENSION_KEY

blueprint = Blueprint("views", __name__)


def _render(body_key: str) -> str:
    provider: I18NProvider = current_app.extensions[EXTENSION_KEY].provider
    page = current_page()
    locale = page.locale if page is not None else None
    return render_template("page.html", body=provider.get_translation(body_key, locale))


@blueprint.get("/")
@page_title(message_key="view.main.title")
def main_view() -> str:
    return _render("view.main.body")


@blueprint.get("/about")
@page_title(message_key="view.about.title", formatter="prefixed")
def about_view() -> str:
    return _render("view.about.body")


@blueprint.get("/contact")
@page_title(default_value="view.contact.title")
def contact_view() -> str:
    return _render("view.contact.body")


@blueprint.get("/untitled")
def untitled_view() -> str:
    """A page without title metadata keeps the application title."""

    return _render("view.main.body")
