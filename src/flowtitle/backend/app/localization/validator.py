"""Consistency checks for the resource bundles declared by the settings."""

from __future__ import annotations

import argparse
import json
import re
import string
from pathlib import Path
from typing import Mapping, Sequence

from flowtitle.backend.config.settings import ConfigurationError, I18NSettings, load_settings

from .catalog import load_translation_table

_FORMATTER = string.Formatter()
_POSITIONAL = re.compile(r"^\d*$")


def _format_scope(scope: str, message: str) -> str:
    return f"{scope}: {message}"


def _placeholders(message: str) -> set[str] | None:
    """Return the replacement fields of ``message`` or ``None`` if malformed."""

    try:
        return {field for _, field, _, _ in _FORMATTER.parse(message) if field is not None}
    except ValueError:
        return None


def validate_table(scope: str, table: Mapping[str, str]) -> list[str]:
    errors: list[str] = []
    for key, message in table.items():
        fields = _placeholders(message)
        if fields is None:
            errors.append(_format_scope(scope, f"malformed message pattern for '{key}'"))
            continue
        named = sorted(field for field in fields if not _POSITIONAL.match(field))
        if named:
            errors.append(
                _format_scope(
                    scope,
                    f"'{key}' uses named placeholders {named}; only positional ones are supported",
                )
            )
        if not message.strip():
            errors.append(_format_scope(scope, f"empty message for '{key}'"))
    return errors


def validate_bundles(settings: I18NSettings) -> list[str]:
    """Compare every declared bundle against the default locale bundle."""

    errors: list[str] = []
    tables: dict[str, Mapping[str, str]] = {}

    for locale in settings.provided_locales:
        scope = f"{settings.bundle_name}_{locale}"
        try:
            tables[locale] = load_translation_table(
                settings.bundle_name, locale, settings.translations_dir
            )
        except (ConfigurationError, json.JSONDecodeError) as error:
            errors.append(_format_scope(scope, str(error)))
            continue
        errors.extend(validate_table(scope, tables[locale]))

    base = tables.get(settings.default_locale)
    if base is None:
        return errors

    base_keys = set(base)
    for locale, table in tables.items():
        if locale == settings.default_locale:
            continue
        scope = f"{settings.bundle_name}_{locale}"
        missing = sorted(base_keys - set(table))
        extra = sorted(set(table) - base_keys)
        if missing:
            errors.append(_format_scope(scope, f"missing keys {missing}"))
        if extra:
            errors.append(
                _format_scope(scope, f"keys not present in the default locale {extra}")
            )
        for key in sorted(base_keys & set(table)):
            if _placeholders(base[key]) != _placeholders(table[key]):
                errors.append(_format_scope(scope, f"placeholder mismatch for '{key}'"))

    return errors


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Validate translation bundles")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to an alternative i18n.yaml configuration file",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for running validations from the command line."""

    args = _build_argument_parser().parse_args(argv)
    try:
        settings = load_settings(args.config)
    except (FileNotFoundError, ConfigurationError) as error:
        print(f"failed to load configuration: {error}")
        return 1

    issues = validate_bundles(settings)
    if issues:
        print(f"{len(issues)} issue(s) detected:")
        for issue in issues:
            print(f"  - {issue}")
        return 1

    print(f"{settings.bundle_name}: {', '.join(settings.provided_locales)} OK")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
