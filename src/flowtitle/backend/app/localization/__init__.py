"""Resource bundle translation helpers for the web UI."""

from .catalog import (
    BundleI18NProvider,
    I18NProvider,
    bundle_filename,
    catalogue_payload,
    load_translation_table,
)

__all__ = [
    "BundleI18NProvider",
    "I18NProvider",
    "bundle_filename",
    "catalogue_payload",
    "load_translation_table",
]
